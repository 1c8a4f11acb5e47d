from core.utils.constants import DEFAULT_CONTENT_TYPE_BINARY, EXTENSION_CONTENT_TYPE_MAP
from core.utils.extensions import normalize_extension


def content_type_for_extension(extension: str) -> str:
    return EXTENSION_CONTENT_TYPE_MAP.get(
        normalize_extension(extension),
        DEFAULT_CONTENT_TYPE_BINARY,
    )
