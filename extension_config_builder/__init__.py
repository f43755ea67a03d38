"""
Extension Config Builder

Validates locale files and assembles the config of checkout UI extensions
before they are packaged.
"""

__version__ = "1.0.0"
__author__ = "Extension Config Builder Team"

from .config import Settings
from .core import ExtensionContext
from .localization import build_localization
from .models import LocaleFile, LocalizationResult, Product
from .specification_handlers import CheckoutUiExtension

__all__ = [
    "Settings",
    "ExtensionContext",
    "build_localization",
    "LocaleFile",
    "LocalizationResult",
    "Product",
    "CheckoutUiExtension",
    "__version__",
]
