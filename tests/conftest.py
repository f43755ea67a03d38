from pathlib import Path

import pytest

from extension_config_builder.config import Settings
from extension_config_builder.core import ExtensionContext


def write_file(root: Path, relative: str, content=b"{}") -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, str):
        content = content.encode("utf-8")
    path.write_bytes(content)
    return path


def json_of_size(size: int) -> bytes:
    """A UTF-8 JSON document of exactly `size` bytes."""
    prefix, suffix = b'{"text": "', b'"}'
    return prefix + b"a" * (size - len(prefix) - len(suffix)) + suffix


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "my-extension"
    root.mkdir()
    return root


@pytest.fixture
def context(project, settings):
    return ExtensionContext.for_project(project, settings)
