"""
Specification handler for checkout UI extensions.
"""

import logging
from typing import Any, Callable, Dict, Optional

from ..core.context import ExtensionContext
from ..features import Argo, ArgoConfig, checkout_ui_extension_argo
from ..localization import build_localization
from ..models import Product
from ..tasks import get_product

logger = logging.getLogger(__name__)

ProductLookup = Callable[[ExtensionContext, str], Optional[Product]]


class CheckoutUiExtension:
    """
    Builds the config and resource URL of a checkout UI extension.

    Config precedence (later wins): declarative YAML keys, renderer
    config, localization.
    """

    IDENTIFIER = "CHECKOUT_UI_EXTENSION"
    PERMITTED_CONFIG_KEYS = ("extension_points", "metafields", "name")
    RESOURCE_URL_FORMAT = "/cart/{variant_id:d}:{quantity:d}"

    def __init__(
        self,
        argo: Argo = checkout_ui_extension_argo,
        product_lookup: ProductLookup = get_product
    ):
        self.argo = argo
        self.product_lookup = product_lookup

    def config(self, context: ExtensionContext) -> Dict[str, Any]:
        """Assemble the extension config for the project at context.root."""
        return {
            **ArgoConfig.parse_yaml(context, self.PERMITTED_CONFIG_KEYS),
            **self.argo.config(context, include_renderer_version=False),
            **self.localization(context),
        }

    def localization(self, context: ExtensionContext) -> Dict[str, Any]:
        """Localization config block, or an empty dict without locale files."""
        result = build_localization(context.root, ignored_dirs=context.non_locale_dirs)
        if result is None:
            return {}
        return result.to_config()

    @property
    def supplies_resource_url(self) -> bool:
        return True

    def build_resource_url(self, context: ExtensionContext, shop: str) -> Optional[str]:
        """
        Cart URL for the shop's first product variant.

        Returns:
            "/cart/<variant_id>:1", or None if the shop has no products
        """
        product = self.product_lookup(context, shop)
        if not product:
            logger.info(f"No product on {shop}, no resource URL")
            return None
        return self.RESOURCE_URL_FORMAT.format(variant_id=product.variant_id, quantity=1)
