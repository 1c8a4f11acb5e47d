import pytest

from core.utils.extensions import (
    build_avatar_path,
    extension_from_filename,
    normalize_extension,
    parse_extension_whitelist,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        (".png", "PNG"),
        ("png", "PNG"),
        ("  .JpG ", "JPG"),
        ("..gif", "GIF"),
        ("", ""),
        (None, ""),
        (".", ""),
    ],
)
def test_normalize_extension(raw, expected) -> None:
    assert normalize_extension(raw) == expected


@pytest.mark.parametrize(
    "file_name,expected",
    [
        ("avatar.png", ".png"),
        ("avatar.tar.gz", ".gz"),
        ("avatar", ""),
        ("dir/avatar.JPG", ".JPG"),
        ("C:\\photos\\avatar.gif", ".gif"),
        ("  me.webp  ", ".webp"),
        (".png", ".png"),
        ("dir/.gif", ".gif"),
        ("avatar.", ""),
        ("v1.2/avatar", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_extension_from_filename(file_name, expected) -> None:
    assert extension_from_filename(file_name) == expected


def test_parse_whitelist_string() -> None:
    assert parse_extension_whitelist("jpg PNG  .gif") == frozenset({"JPG", "PNG", "GIF"})


def test_parse_whitelist_iterable_drops_empty_tokens() -> None:
    assert parse_extension_whitelist(["png", "", " ", ".bmp"]) == frozenset({"PNG", "BMP"})


def test_parse_whitelist_none() -> None:
    assert parse_extension_whitelist(None) == frozenset()


def test_build_avatar_path() -> None:
    assert build_avatar_path(7, "PNG") == "Avatars/7.PNG"
