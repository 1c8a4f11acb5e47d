"""File extension helpers.

Extensions are compared in a single canonical form: surrounding whitespace
trimmed, leading dots stripped, upper-cased. ``" .png"``, ``"PNG"`` and
``"..Png"`` all normalize to ``"PNG"``.
"""

from collections.abc import Iterable

from core.utils.constants import AVATAR_FOLDER_PATH


def normalize_extension(extension: str | None) -> str:
    """Return the canonical form of an extension, or "" when there is none."""
    if not extension:
        return ""

    return extension.strip().lstrip(".").upper()


def extension_from_filename(file_name: str | None) -> str:
    """Extract the raw extension (with its dot) from a file name.

    Everything from the last dot of the base name counts, so
    ``"avatar.tar.gz"`` yields ``".gz"`` and a bare ``".png"`` yields
    ``".png"``. A trailing dot means no extension. Backslash separated
    client paths are handled too.
    """
    if not file_name:
        return ""

    base_name = file_name.strip().replace("\\", "/").rpartition("/")[2]
    _, dot, suffix = base_name.rpartition(".")
    if not dot or not suffix:
        return ""

    return f".{suffix}"


def parse_extension_whitelist(whitelist: str | Iterable[str] | None) -> frozenset[str]:
    """Parse a whitelist such as ``"JPG PNG GIF"`` into normalized tokens."""
    if whitelist is None:
        return frozenset()

    tokens = whitelist.split() if isinstance(whitelist, str) else whitelist

    return frozenset(
        normalized for normalized in (normalize_extension(t) for t in tokens) if normalized
    )


def build_avatar_path(entity_id: int, extension: str) -> str:
    """Deterministic storage path of an entity's avatar file."""
    return f"{AVATAR_FOLDER_PATH}/{entity_id}.{extension}"
