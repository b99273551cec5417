"""DID document exceptions."""

from ..core.error import BaseError


class DIDDocumentError(BaseError):
    """Base class for DID document exceptions."""


class DecodingError(DIDDocumentError):
    """Raised when input cannot be decoded to text or parsed as JSON."""


class CompactionError(DIDDocumentError):
    """Raised when JSON-LD compaction rejects a merged DID document."""


class InitializationError(DIDDocumentError):
    """Raised when the context or skeleton resources are not available."""
