"""Tests for the checkout UI extension handler."""

import base64

import pytest

from extension_config_builder.errors import InvalidFilenameError, ProductLookupError
from extension_config_builder.features import Argo
from extension_config_builder.models import Product
from extension_config_builder.specification_handlers import CheckoutUiExtension

from conftest import write_file


class StaticArgo(Argo):
    def __init__(self, config):
        super().__init__(renderer_packages=())
        self._config = config
        self.calls = []

    def config(self, context, include_renderer_version=True):
        self.calls.append(include_renderer_version)
        return dict(self._config)


def test_config_merges_yaml_renderer_and_localization(context, project):
    write_file(project, "extension.config.yml", "name: Gift message\nextension_points: [Checkout::Dynamic::Render]\n")
    write_file(project, "build/main.js", "render();")
    write_file(project, "locales/en.default.json", '{"title": "Gift"}')
    write_file(project, "locales/fr.json", '{"title": "Cadeau"}')

    config = CheckoutUiExtension().config(context)

    assert config["name"] == "Gift message"
    assert config["extension_points"] == ["Checkout::Dynamic::Render"]
    assert config["serialized_script"] == base64.b64encode(b"render();").decode()
    assert "renderer_version" not in config
    assert config["localization"]["default_locale"] == "en"
    assert set(config["localization"]["files"]) == {"en", "fr"}


def test_config_without_locales_has_no_localization(context, project):
    write_file(project, "build/main.js", "render();")

    config = CheckoutUiExtension().config(context)

    assert "localization" not in config


def test_renderer_config_excludes_version_and_overrides_yaml(context, project):
    write_file(project, "extension.config.yml", "name: From YAML\n")
    argo = StaticArgo({"name": "From renderer", "serialized_script": "eA=="})

    config = CheckoutUiExtension(argo=argo).config(context)

    assert config == {"name": "From renderer", "serialized_script": "eA=="}
    assert argo.calls == [False]


def test_localization_overrides_earlier_keys(context, project):
    write_file(project, "locales/en.default.json")
    argo = StaticArgo({"localization": "stale"})

    config = CheckoutUiExtension(argo=argo).config(context)

    assert config["localization"]["default_locale"] == "en"


def test_config_propagates_localization_errors(context, project):
    write_file(project, "build/main.js", "render();")
    write_file(project, "assets/logo.png", b"\x89PNG")

    with pytest.raises(InvalidFilenameError):
        CheckoutUiExtension().config(context)


def test_supplies_resource_url():
    assert CheckoutUiExtension().supplies_resource_url is True


def test_build_resource_url_uses_first_variant(context):
    calls = []

    def lookup(ctx, shop):
        calls.append((ctx, shop))
        return Product(id=1, variant_id=12345, title="Gift card")

    handler = CheckoutUiExtension(product_lookup=lookup)

    assert handler.build_resource_url(context, "example.myshopify.com") == "/cart/12345:1"
    assert calls == [(context, "example.myshopify.com")]


def test_build_resource_url_without_product_returns_none(context):
    handler = CheckoutUiExtension(product_lookup=lambda ctx, shop: None)

    assert handler.build_resource_url(context, "example.myshopify.com") is None


def test_build_resource_url_propagates_lookup_errors(context):
    def lookup(ctx, shop):
        raise ProductLookupError("Server error: 502", status_code=502)

    with pytest.raises(ProductLookupError):
        CheckoutUiExtension(product_lookup=lookup).build_resource_url(context, "example.myshopify.com")


def test_config_skips_build_and_source_directories(context, project):
    write_file(project, "build/main.js", "render();")
    write_file(project, "src/index.jsx", "export default () => null;")
    write_file(project, "node_modules/@shopify/checkout-ui-extensions/package.json", "{}")
    write_file(project, "locales/en.default.json")

    config = CheckoutUiExtension().config(context)

    assert list(config["localization"]["files"]) == ["en"]


def test_non_locale_dirs_include_script_directory(project, settings):
    from extension_config_builder.core import ExtensionContext

    context = ExtensionContext.for_project(
        project, settings.model_copy(update={"script_path": "dist/extension.js"})
    )

    assert context.non_locale_dirs == ["node_modules", "src", "dist"]
