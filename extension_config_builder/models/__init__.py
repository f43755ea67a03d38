"""
Data models for Extension Config Builder.
"""

from .localization import (
    LocaleFile,
    LocalizationResult,
)
from .product import Product

__all__ = [
    "LocaleFile",
    "LocalizationResult",
    "Product",
]
