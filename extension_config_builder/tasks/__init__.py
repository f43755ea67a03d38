"""
Remote tasks run against a shop.
"""

from .get_product import AdminClient, get_product, parse_gid

__all__ = [
    "AdminClient",
    "get_product",
    "parse_gid",
]
