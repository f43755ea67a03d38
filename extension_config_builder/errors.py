"""
Error types raised while assembling extension configuration.
"""

from typing import Iterable, Optional


class ExtensionError(Exception):
    """Base class for errors that abort the current build step."""
    pass


class InvalidFilenameError(ExtensionError):
    """A locale file is in the wrong place or has a malformed name."""
    pass


class DuplicateLocaleError(InvalidFilenameError):
    """Two locale files resolve to the same locale code."""

    def __init__(self, locale: str, filenames: Iterable[str]):
        self.locale = locale
        self.filenames = list(filenames)
        super().__init__(
            f"Duplicate locale: {locale} ({', '.join(self.filenames)})"
        )


class SingleDefaultLocaleError(ExtensionError):
    """Zero or several locale files are marked as the default."""
    pass


class FileTooLargeError(ExtensionError):
    """A locale file exceeds the per-file size limit."""
    pass


class InvalidLocaleContentError(ExtensionError):
    """A locale file is not valid UTF-8 text."""
    pass


class ConfigurationError(ExtensionError):
    """The declarative extension config cannot be used."""
    pass


class MissingScriptError(ExtensionError):
    """The compiled extension script has not been built."""
    pass


class ProductLookupError(ExtensionError):
    """Looking up a product on the shop failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
