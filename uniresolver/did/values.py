"""Classification of raw JSON-LD values held by a DID document."""

from collections.abc import Mapping
from enum import Enum
from urllib.parse import urlparse


class TermKind(Enum):
    """Kinds of value a JSON-LD term can hold."""

    ABSENT = "absent"
    STRING = "string"
    URI = "uri"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OTHER = "other"


def is_uri(value: str) -> bool:
    """
    Whether a string is an absolute URI.

    Args:
        value: candidate string

    Returns: True when the string carries a URI scheme (every DID does)

    """

    try:
        return bool(urlparse(value).scheme)
    except ValueError:
        return False


def kind_of(value) -> TermKind:
    """
    Classify a raw value.

    Strings are split between URIs and plain strings; lists and tuples are
    sequences; anything else that is not a mapping is OTHER.
    """

    if value is None:
        return TermKind.ABSENT
    if isinstance(value, str):
        return TermKind.URI if is_uri(value) else TermKind.STRING
    if isinstance(value, Mapping):
        return TermKind.MAPPING
    if isinstance(value, (list, tuple)):
        return TermKind.SEQUENCE
    return TermKind.OTHER
