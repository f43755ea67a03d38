"""
Shared extension features: declarative config and renderer settings.
"""

from .argo import Argo, checkout_ui_extension_argo
from .argo_config import ArgoConfig

__all__ = [
    "Argo",
    "ArgoConfig",
    "checkout_ui_extension_argo",
]
