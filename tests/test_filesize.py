import pytest

from extension_config_builder.utils import to_filesize


@pytest.mark.parametrize("num_bytes, expected", [
    (0, "0B"),
    (500, "500B"),
    (1023, "1023B"),
    (1024, "1kB"),
    (1536, "1.5kB"),
    (64 * 1024, "64kB"),
    (1024 ** 2, "1MB"),
    (1024 ** 2 - 1, "1MB"),
    (3 * 1024 ** 3, "3GB"),
])
def test_to_filesize(num_bytes, expected):
    assert to_filesize(num_bytes) == expected


def test_to_filesize_with_space():
    assert to_filesize(64 * 1024, space=True) == "64 kB"


def test_to_filesize_rejects_negative_sizes():
    with pytest.raises(ValueError):
        to_filesize(-1)
