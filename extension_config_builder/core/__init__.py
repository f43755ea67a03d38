"""
Core components shared by all extension handlers.
"""

from .context import ExtensionContext

__all__ = [
    "ExtensionContext",
]
