import pytest

from ..resources import initialize


@pytest.fixture(scope="session", autouse=True)
def did_document_resources():
    yield initialize()
