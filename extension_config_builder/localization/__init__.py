"""
Localization support for extension locale files.
"""

from .builder import (
    L10N_DIRECTORY,
    L10N_SIZE_LIMIT,
    build_localization,
    encode_locale_content,
    is_default_locale_file,
    list_project_files,
    locale_from_filename,
    read_locale_file,
    validate_locale_file,
)

__all__ = [
    "L10N_DIRECTORY",
    "L10N_SIZE_LIMIT",
    "build_localization",
    "encode_locale_content",
    "is_default_locale_file",
    "list_project_files",
    "locale_from_filename",
    "read_locale_file",
    "validate_locale_file",
]
