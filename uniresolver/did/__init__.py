"""DID document model and its JSON-LD serialization."""

from .diddocument import DIDDocument
from .error import (
    CompactionError,
    DecodingError,
    DIDDocumentError,
    InitializationError,
)
from .publickey import PublicKey
from .resources import DIDDocumentResources, get_resources, initialize, load_resources
from .service import Service

__all__ = [
    "CompactionError",
    "DecodingError",
    "DIDDocument",
    "DIDDocumentError",
    "DIDDocumentResources",
    "InitializationError",
    "PublicKey",
    "Service",
    "get_resources",
    "initialize",
    "load_resources",
]
