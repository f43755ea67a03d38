"""
Localization block for checkout UI extensions.

Locale files live in a `locales` folder at the project root and are named
after their locale code, e.g. `locales/en.default.json`, `locales/fr-CA.json`.
Exactly one of them carries the `.default` marker. Their contents are shipped
base64-encoded inside the extension config.
"""

import base64
import logging
import re
from collections import defaultdict
from pathlib import Path, PurePosixPath
from typing import Iterable, Iterator, List, Optional, Union

from ..errors import (
    DuplicateLocaleError,
    FileTooLargeError,
    InvalidFilenameError,
    InvalidLocaleContentError,
    SingleDefaultLocaleError,
)
from ..models import LocaleFile, LocalizationResult
from ..utils import to_filesize

logger = logging.getLogger(__name__)

L10N_DIRECTORY = "locales"
L10N_FILE_EXTENSION = ".json"
L10N_DEFAULT_MARKER = ".default"
L10N_ENCODING = "utf-8"
L10N_SIZE_LIMIT = 64 * 1024
L10N_DEFAULT_LOCALE_REGEX = re.compile(r"[a-z]{2,3}(-[A-Z]{2})?\.default\.json")
L10N_LOCALE_REGEX = re.compile(r"[a-z]{2,3}(-[A-Z]{2})?")


def _strip_suffix(name: str, suffix: str) -> str:
    if name.endswith(suffix) and name != suffix:
        return name[:-len(suffix)]
    return name


def locale_from_filename(filename: Union[str, PurePosixPath]) -> str:
    """
    Derive the locale code from a locale filename.

    Strips the `.json` extension, then an optional `.default` marker:
    `locales/en-US.default.json` -> `en-US`.
    """
    name = PurePosixPath(filename).name
    return _strip_suffix(_strip_suffix(name, L10N_FILE_EXTENSION), L10N_DEFAULT_MARKER)


def is_default_locale_file(filename: Union[str, PurePosixPath]) -> bool:
    """Check whether a filename carries the default locale marker."""
    return L10N_DEFAULT_LOCALE_REGEX.fullmatch(PurePosixPath(filename).name) is not None


def list_project_files(root: Path, ignored_dirs: Iterable[str] = ()) -> Iterator[PurePosixPath]:
    """
    List regular files below root, relative to it, in sorted order.

    Hidden files and anything inside hidden directories are not listed,
    nor is anything inside the top-level directories named in ignored_dirs.
    """
    if not root.is_dir():
        raise FileNotFoundError(f"Extension root is not a directory: {root}")

    ignored = set(ignored_dirs)
    relative_paths = []
    for path in root.rglob("*"):
        relative = PurePosixPath(path.relative_to(root).as_posix())
        if any(part.startswith(".") for part in relative.parts):
            continue
        if len(relative.parts) > 1 and relative.parts[0] in ignored:
            continue
        if path.is_file():
            relative_paths.append(relative)

    yield from sorted(relative_paths)


def validate_locale_file(root: Path, filename: PurePosixPath) -> bool:
    """
    Check a project file against the locale file rules.

    Args:
        root: Extension project root
        filename: File path relative to root

    Returns:
        True if the file is a locale file, False if it is not eligible
        (files at the root of the project are skipped)

    Raises:
        InvalidFilenameError: Wrong directory, extension or locale format
        FileTooLargeError: File larger than L10N_SIZE_LIMIT
    """
    dirname = filename.parent.as_posix()
    if dirname == ".":
        return False

    if dirname != L10N_DIRECTORY:
        raise InvalidFilenameError(f"Invalid directory: {dirname}")

    if filename.suffix != L10N_FILE_EXTENSION:
        raise InvalidFilenameError(
            f"Invalid filename: {filename}; Only {L10N_FILE_EXTENSION} allowed in {dirname}"
        )

    locale = locale_from_filename(filename)
    if not L10N_LOCALE_REGEX.fullmatch(locale):
        raise InvalidFilenameError(
            f"Invalid filename: {filename}; Invalid locale format: {locale}"
        )

    if (root / filename).stat().st_size > L10N_SIZE_LIMIT:
        raise FileTooLargeError(
            f"Single file size must be less than {to_filesize(L10N_SIZE_LIMIT)}"
        )

    return True


def read_locale_file(root: Path, filename: PurePosixPath) -> LocaleFile:
    """
    Read a validated locale file.

    Raises:
        InvalidLocaleContentError: If the file is not UTF-8 text
    """
    with open(root / filename, "rb") as f:
        content = f.read()

    try:
        content.decode(L10N_ENCODING)
    except UnicodeDecodeError as e:
        raise InvalidLocaleContentError(
            f"Invalid file content: {filename}; Locale files must be {L10N_ENCODING} encoded"
        ) from e

    return LocaleFile(
        relative_path=str(filename),
        locale=locale_from_filename(filename),
        is_default=is_default_locale_file(filename),
        content=content,
    )


def _assert_unique_locales(filenames: List[PurePosixPath]) -> None:
    by_locale = defaultdict(list)
    for filename in filenames:
        by_locale[locale_from_filename(filename)].append(str(filename))

    for locale, paths in by_locale.items():
        if len(paths) > 1:
            raise DuplicateLocaleError(locale, paths)


def encode_locale_content(content: bytes) -> str:
    """Base64-encode locale file content (standard alphabet, no line breaks)."""
    return base64.b64encode(content).decode("ascii")


def build_localization(
    root: Union[str, Path],
    ignored_dirs: Iterable[str] = ()
) -> Optional[LocalizationResult]:
    """
    Build the localization block for an extension project.

    Args:
        root: Extension project root
        ignored_dirs: Top-level project directories left out of the scan

    Returns:
        LocalizationResult, or None if the project has no locale files

    Raises:
        InvalidFilenameError: A file breaks the naming rules (first one found)
        DuplicateLocaleError: Two files resolve to the same locale code
        SingleDefaultLocaleError: Not exactly one default locale file
        FileTooLargeError: A locale file exceeds the size limit
        InvalidLocaleContentError: A locale file is not UTF-8 text
    """
    root = Path(root)
    filenames = [
        filename for filename in list_project_files(root, ignored_dirs)
        if validate_locale_file(root, filename)
    ]

    # Localization is optional
    if not filenames:
        logger.debug(f"No locale files under {root}")
        return None

    default_matches = [f for f in filenames if is_default_locale_file(f)]
    if len(default_matches) != 1:
        raise SingleDefaultLocaleError(
            "There must be one and only one locale identified as the default locale."
        )

    _assert_unique_locales(filenames)

    locale_files = [read_locale_file(root, filename) for filename in filenames]
    default_locale = locale_from_filename(default_matches[0])

    logger.info(
        f"Encoded {len(locale_files)} locale file(s), default locale: {default_locale}"
    )

    return LocalizationResult(
        default_locale=default_locale,
        files={lf.locale: encode_locale_content(lf.content) for lf in locale_files},
    )
