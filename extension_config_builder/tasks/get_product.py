"""
Admin API client for looking up a shop's first product.
"""

import httpx
from typing import Any, Dict, Optional
import logging

from ..core.context import ExtensionContext
from ..errors import ProductLookupError
from ..models import Product
from ..utils import handle_http_error

logger = logging.getLogger(__name__)

GET_PRODUCT_QUERY = """
query GetProduct {
  products(first: 1) {
    edges {
      node {
        id
        title
        variants(first: 1) {
          edges {
            node {
              id
            }
          }
        }
      }
    }
  }
}
"""


def parse_gid(gid: str) -> int:
    """
    Extract the numeric ID from a global ID.

    Args:
        gid: Global ID such as "gid://shopify/ProductVariant/123"

    Returns:
        The numeric ID
    """
    tail = str(gid).rstrip("/").rsplit("/", 1)[-1]
    try:
        return int(tail)
    except ValueError:
        raise ProductLookupError(f"Unexpected ID format: {gid}") from None


class AdminClient:
    """
    Minimal Admin GraphQL API client.

    Lookups are not retried; any failure raises ProductLookupError.
    """

    def __init__(
        self,
        shop: str,
        access_token: Optional[str],
        api_version: str = "2023-01",
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize the Admin API client.

        Args:
            shop: Shop domain, e.g. "example.myshopify.com"
            access_token: Admin API access token
            api_version: Admin API version
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used in tests)
        """
        self.shop = shop.strip().removeprefix("https://").removeprefix("http://").rstrip("/")
        self.access_token = access_token
        self.api_version = api_version
        self.client = httpx.Client(timeout=timeout, transport=transport)

    @property
    def graphql_url(self) -> str:
        return f"https://{self.shop}/admin/api/{self.api_version}/graphql.json"

    def query(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Run a GraphQL query and return its data.

        Raises:
            ProductLookupError: On transport, HTTP or GraphQL errors
        """
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.access_token:
            headers["X-Shopify-Access-Token"] = self.access_token

        try:
            response = self.client.post(
                self.graphql_url,
                headers=headers,
                json={"query": query, "variables": variables or {}}
            )
        except httpx.HTTPError as e:
            raise ProductLookupError(f"Request to {self.shop} failed: {e}") from e

        if response.status_code != 200:
            handle_http_error(response)

        try:
            payload = response.json()
        except ValueError as e:
            raise ProductLookupError(f"Invalid JSON response from {self.shop}") from e

        if payload.get("errors"):
            messages = [
                error.get("message", str(error)) if isinstance(error, dict) else str(error)
                for error in payload["errors"]
            ]
            raise ProductLookupError(f"GraphQL error: {'; '.join(messages)}")

        return payload.get("data") or {}

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def _parse_product(data: Dict[str, Any]) -> Optional[Product]:
    edges = (data.get("products") or {}).get("edges") or []
    if not edges:
        return None

    node = edges[0].get("node") or {}
    variant_edges = (node.get("variants") or {}).get("edges") or []
    if not variant_edges:
        return None

    return Product(
        id=parse_gid(node["id"]),
        variant_id=parse_gid(variant_edges[0]["node"]["id"]),
        title=node.get("title"),
    )


def get_product(
    context: ExtensionContext,
    shop: str,
    transport: Optional[httpx.BaseTransport] = None
) -> Optional[Product]:
    """
    Look up the first product of a shop.

    Args:
        context: Extension context (supplies API settings)
        shop: Shop domain
        transport: Optional httpx transport (used in tests)

    Returns:
        The first product with a variant, or None if the shop has none
    """
    settings = context.settings
    with AdminClient(
        shop,
        access_token=settings.admin_access_token,
        api_version=settings.admin_api_version,
        timeout=settings.http_timeout,
        transport=transport
    ) as client:
        product = _parse_product(client.query(GET_PRODUCT_QUERY))

    if product is None:
        logger.info(f"No products found on {shop}")
    else:
        logger.debug(f"Found product {product} on {shop}")
    return product
