"""
Extension type handlers.
"""

from .checkout_ui_extension import CheckoutUiExtension

__all__ = [
    "CheckoutUiExtension",
]
