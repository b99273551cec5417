"""DID document resources tests."""

import pytest

from .. import resources as did_resources
from ..constants import DID_CONTEXT_URL
from ..document_loader import StaticCacheDocumentLoader
from ..error import InitializationError
from ..resources import DIDDocumentResources, get_resources, initialize, load_resources


def test_load_resources():
    resources = load_resources()
    assert resources.context == {"@context": DID_CONTEXT_URL}
    assert resources.skeleton["@context"] == DID_CONTEXT_URL
    assert DID_CONTEXT_URL in resources.document_loader


def test_resources_are_read_only():
    resources = load_resources()
    with pytest.raises(TypeError):
        resources.skeleton["id"] = "did:example:123"
    with pytest.raises(TypeError):
        resources.context["@context"] = "https://example.com/other"


def test_copies_are_independent():
    source = {"@context": DID_CONTEXT_URL, "meta": {"a": 1}}
    resources = DIDDocumentResources(
        {"@context": DID_CONTEXT_URL}, source, StaticCacheDocumentLoader()
    )
    source["meta"]["a"] = 2

    skeleton = resources.skeleton_copy()
    skeleton["meta"]["a"] = 3
    skeleton["id"] = "did:example:123"

    assert resources.skeleton["meta"] == {"a": 1}
    assert "id" not in resources.skeleton


def test_missing_resource():
    with pytest.raises(InitializationError) as excinfo:
        load_resources(skeleton_file="no-such-skeleton.jsonld")
    assert "no-such-skeleton.jsonld" in excinfo.value.message


def test_missing_context_file():
    with pytest.raises(InitializationError):
        load_resources(context_file="no-such-context.jsonld")


def test_missing_package():
    with pytest.raises(InitializationError) as excinfo:
        load_resources(package="no_such_pkg")
    assert isinstance(excinfo.value.__cause__, ImportError)


def test_missing_bundled_context_definition(monkeypatch):
    monkeypatch.setattr(
        StaticCacheDocumentLoader,
        "CONTEXT_FILE_MAPPING",
        {DID_CONTEXT_URL: "no-such-definition.jsonld"},
    )
    with pytest.raises(InitializationError) as excinfo:
        load_resources()
    assert "bundled JSON-LD contexts" in excinfo.value.message
    assert isinstance(excinfo.value.__cause__, OSError)


def test_initialize_once(monkeypatch):
    monkeypatch.setattr(did_resources, "_RESOURCES", None)
    with pytest.raises(InitializationError):
        get_resources()

    first = initialize()
    assert get_resources() is first
    assert initialize(load_resources()) is first


def test_initialize_with_resources(monkeypatch):
    monkeypatch.setattr(did_resources, "_RESOURCES", None)
    resources = load_resources()
    assert initialize(resources) is resources
    assert get_resources() is resources
