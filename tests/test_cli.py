"""Tests for the extension-config CLI."""

import base64
import json

import pytest
from click.testing import CliRunner

from extension_config_builder import main as cli_module
from extension_config_builder.main import cli
from extension_config_builder.models import Product
from extension_config_builder.specification_handlers import CheckoutUiExtension

from conftest import write_file


@pytest.fixture
def runner(monkeypatch):
    for name in ("EXTENSION_LOG_LEVEL", "EXTENSION_LOG_FILE", "EXTENSION_JSON_LOGS"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


def test_build_writes_config_file(runner, project, tmp_path):
    write_file(project, "extension.config.yml", "name: Gift message\n")
    write_file(project, "build/main.js", "render();")
    write_file(project, "locales/en.default.json", '{"title": "Gift"}')
    output = tmp_path / "out" / "config.json"

    result = runner.invoke(cli, ["build", str(project), "--output", str(output)])

    assert result.exit_code == 0, result.output
    config = json.loads(output.read_text(encoding="utf-8"))
    assert config["name"] == "Gift message"
    assert config["serialized_script"] == base64.b64encode(b"render();").decode()
    assert config["localization"] == {
        "default_locale": "en",
        "files": {"en": base64.b64encode(b'{"title": "Gift"}').decode()},
    }


def test_build_fails_on_invalid_locale(runner, project):
    write_file(project, "build/main.js", "render();")
    write_file(project, "locales/english.default.json")

    result = runner.invoke(cli, ["build", str(project)])

    assert result.exit_code == 1
    assert "Invalid locale format" in result.output


def test_build_fails_without_script(runner, project):
    result = runner.invoke(cli, ["build", str(project)])

    assert result.exit_code == 1
    assert "build/main.js" in result.output


def test_locales_lists_locales(runner, project):
    write_file(project, "locales/en.default.json")
    write_file(project, "locales/fr.json")

    result = runner.invoke(cli, ["locales", str(project)])

    assert result.exit_code == 0, result.output
    assert "2 locale(s), default: en" in result.output


def test_locales_reports_too_many_defaults(runner, project):
    write_file(project, "locales/en.default.json")
    write_file(project, "locales/fr.default.json")

    result = runner.invoke(cli, ["locales", str(project)])

    assert result.exit_code == 1
    assert "one and only one" in result.output


def test_resource_url_prints_cart_path(runner, project, monkeypatch):
    monkeypatch.setattr(
        cli_module,
        "CheckoutUiExtension",
        lambda: CheckoutUiExtension(product_lookup=lambda ctx, shop: Product(id=1, variant_id=12345)),
    )

    result = runner.invoke(cli, ["resource-url", str(project), "--shop", "example.myshopify.com"])

    assert result.exit_code == 0, result.output
    assert "/cart/12345:1" in result.output


def test_resource_url_without_products(runner, project, monkeypatch):
    monkeypatch.setattr(
        cli_module,
        "CheckoutUiExtension",
        lambda: CheckoutUiExtension(product_lookup=lambda ctx, shop: None),
    )

    result = runner.invoke(cli, ["resource-url", str(project), "--shop", "example.myshopify.com"])

    assert result.exit_code == 0
    assert "No products found on example.myshopify.com" in result.output
    assert "/cart/" not in result.output
