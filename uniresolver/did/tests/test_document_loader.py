"""Static document loader tests."""

import pytest
from pyld.jsonld import JsonLdError

from ..constants import DID_CONTEXT_URL
from ..document_loader import StaticCacheDocumentLoader


@pytest.fixture
def loader():
    yield StaticCacheDocumentLoader()


def test_load_bundled(loader):
    remote = loader.load(DID_CONTEXT_URL)
    assert remote["documentUrl"] == DID_CONTEXT_URL
    assert remote["contextUrl"] is None
    assert remote["contentType"] == "application/ld+json"
    context = remote["document"]["@context"]
    assert context["id"] == "@id"
    assert context["publicKey"]["@container"] == "@set"


def test_load_returns_copy(loader):
    loader(DID_CONTEXT_URL)["document"]["@context"]["id"] = "changed"
    assert loader(DID_CONTEXT_URL)["document"]["@context"]["id"] == "@id"


def test_unknown_url(loader):
    assert "https://example.com/context" not in loader
    with pytest.raises(JsonLdError):
        loader.load("https://example.com/context", {})


def test_custom_mapping():
    loader = StaticCacheDocumentLoader({"https://example.com/did": "uniresolver-did-context.jsonld"})
    assert "https://example.com/did" in loader
    assert DID_CONTEXT_URL not in loader


def test_missing_file():
    with pytest.raises(OSError):
        StaticCacheDocumentLoader({"https://example.com/x": "missing.jsonld"})
