"""
Utility modules for Extension Config Builder.
"""

from .filesize import to_filesize
from .http import handle_http_error
from .logging_config import (
    configure_logging,
    BuildReporter,
)

__all__ = [
    "to_filesize",
    # HTTP
    "handle_http_error",
    # Logging
    "configure_logging",
    "BuildReporter",
]
