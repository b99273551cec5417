"""Offline JSON-LD document loader.

Serves the contexts bundled with the package to pyld, so compaction never
dereferences a URL over the network.
"""

import copy
import importlib.resources
import json
import logging
from typing import Dict, Optional

from pyld.jsonld import JsonLdError

from .constants import DID_CONTEXT_URL, RESOURCES_PACKAGE

LOGGER = logging.getLogger(__name__)


def read_resource(filename: str, package: str = RESOURCES_PACKAGE) -> str:
    """Read a bundled resource file as text."""
    return (importlib.resources.files(package) / filename).read_text(
        encoding="utf-8"
    )


def _remote_document(original_url: str, document: dict) -> dict:
    return {
        "contentType": "application/ld+json",
        "contextUrl": None,
        "documentUrl": original_url,
        "document": document,
    }


class StaticCacheDocumentLoader:
    """Document loader answering from a fixed set of bundled contexts."""

    CONTEXT_FILE_MAPPING = {
        DID_CONTEXT_URL: "uniresolver-did-context.jsonld",
    }

    def __init__(self, context_file_mapping: Optional[Dict[str, str]] = None):
        """Read every mapped context file once.

        Raises:
            OSError: if a mapped file is missing.
            ValueError: if a mapped file is not valid JSON.
        """
        mapping = (
            context_file_mapping
            if context_file_mapping is not None
            else self.CONTEXT_FILE_MAPPING
        )
        self.cache = {
            url: json.loads(read_resource(filename))
            for url, filename in mapping.items()
        }

    def load(self, url: str, options: dict = None) -> dict:
        """Load a JSON-LD document for url from the static cache."""
        cached = self.cache.get(url)

        if cached is not None:
            LOGGER.info("Cache hit for context: %s", url)
            return _remote_document(url, copy.deepcopy(cached))

        LOGGER.warning("Context %s is not bundled, refusing to load it.", url)
        raise JsonLdError(
            "URL could not be dereferenced; only bundled contexts are available.",
            "jsonld.LoadDocumentError",
            {"url": url},
            code="loading document failed",
        )

    def __call__(self, url: str, options: dict = None) -> dict:
        """Allow the loader instance to be handed to pyld directly."""
        return self.load(url, options)

    def __contains__(self, url: str) -> bool:
        """Whether url is served by this loader."""
        return url in self.cache
