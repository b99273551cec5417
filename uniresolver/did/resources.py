"""Load-once context and skeleton resources for DID document serialization."""

import copy
import json
import logging
from types import MappingProxyType
from typing import Mapping, Optional

from .constants import CONTEXT_RESOURCE, RESOURCES_PACKAGE, SKELETON_RESOURCE
from .document_loader import StaticCacheDocumentLoader, read_resource
from .error import InitializationError

LOGGER = logging.getLogger(__name__)


class DIDDocumentResources:
    """
    Immutable bundle of what serialization needs.

    Holds the compaction context, the skeleton merged underneath every
    document, and the document loader that resolves context URLs.
    """

    def __init__(
        self,
        context: Mapping,
        skeleton: Mapping,
        document_loader: StaticCacheDocumentLoader,
    ):
        """Wrap already parsed resources; the inputs are copied."""
        self._context = MappingProxyType(copy.deepcopy(dict(context)))
        self._skeleton = MappingProxyType(copy.deepcopy(dict(skeleton)))
        self._document_loader = document_loader

    @property
    def context(self) -> Mapping:
        """Read-only view of the compaction context."""
        return self._context

    @property
    def skeleton(self) -> Mapping:
        """Read-only view of the skeleton document."""
        return self._skeleton

    @property
    def document_loader(self) -> StaticCacheDocumentLoader:
        """Accessor for the JSON-LD document loader."""
        return self._document_loader

    def skeleton_copy(self) -> dict:
        """Return a fresh mutable deep copy of the skeleton."""
        return copy.deepcopy(dict(self._skeleton))

    def context_copy(self) -> dict:
        """Return a fresh mutable deep copy of the context."""
        return copy.deepcopy(dict(self._context))

    def __repr__(self) -> str:
        """Return debug representation."""
        return "<DIDDocumentResources context={} skeleton_keys={}>".format(
            dict(self._context), list(self._skeleton)
        )


def _load_mapping(filename: str, package: str) -> dict:
    try:
        value = json.loads(read_resource(filename, package))
    except (ImportError, OSError, ValueError) as err:
        raise InitializationError(
            "Could not load DID document resource {}".format(filename)
        ) from err
    if not isinstance(value, dict):
        raise InitializationError(
            "DID document resource {} is not a JSON object".format(filename)
        )
    return value


def load_resources(
    context_file: str = CONTEXT_RESOURCE,
    skeleton_file: str = SKELETON_RESOURCE,
    package: str = RESOURCES_PACKAGE,
    document_loader: StaticCacheDocumentLoader = None,
) -> DIDDocumentResources:
    """
    Read and parse the bundled context and skeleton resources.

    Args:
        context_file: resource name of the compaction context
        skeleton_file: resource name of the skeleton document
        package: package holding the resource files
        document_loader: loader for context URLs, the bundled static one
            by default

    Returns: the loaded resources

    Raises:
        InitializationError: if any resource is missing or malformed

    """
    context = _load_mapping(context_file, package)
    skeleton = _load_mapping(skeleton_file, package)

    if document_loader is None:
        try:
            document_loader = StaticCacheDocumentLoader()
        except (ImportError, OSError, ValueError) as err:
            raise InitializationError(
                "Could not load bundled JSON-LD contexts"
            ) from err

    LOGGER.debug(
        "Loaded DID document resources %s and %s from %s",
        context_file,
        skeleton_file,
        package,
    )
    return DIDDocumentResources(context, skeleton, document_loader)


_RESOURCES: Optional[DIDDocumentResources] = None


def initialize(resources: DIDDocumentResources = None) -> DIDDocumentResources:
    """
    Install the process-wide resources; meant to run once at startup.

    Later calls return the resources already installed and ignore their
    argument.

    Raises:
        InitializationError: if the bundled resources cannot be loaded

    """
    global _RESOURCES

    if _RESOURCES is None:
        _RESOURCES = resources if resources is not None else load_resources()
        LOGGER.debug("Installed process-wide DID document resources")
    return _RESOURCES


def get_resources() -> DIDDocumentResources:
    """
    Return the process-wide resources.

    Raises:
        InitializationError: if initialize() has not completed

    """
    if _RESOURCES is None:
        raise InitializationError("DID document resources have not been initialized")
    return _RESOURCES
