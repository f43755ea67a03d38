"""
HTTP helpers for Admin API calls.
"""

import httpx
import logging

from ..errors import ProductLookupError

logger = logging.getLogger(__name__)


def handle_http_error(response: httpx.Response) -> None:
    """
    Convert HTTP error responses to ProductLookupError.

    Args:
        response: The HTTP response to check

    Raises:
        ProductLookupError: For 4xx and 5xx responses
    """
    if response.status_code == 401 or response.status_code == 403:
        raise ProductLookupError(
            f"Not authorized to read products: {response.status_code}",
            status_code=response.status_code
        )
    elif response.status_code == 429:
        retry_after = response.headers.get('retry-after')
        raise ProductLookupError(
            f"Rate limited by shop. Retry after: {retry_after}s",
            status_code=response.status_code
        )
    elif response.status_code >= 500:
        raise ProductLookupError(
            f"Server error: {response.status_code} - {response.text[:200]}",
            status_code=response.status_code
        )
    elif response.status_code >= 400:
        raise ProductLookupError(
            f"Client error: {response.status_code} - {response.text[:200]}",
            status_code=response.status_code
        )
