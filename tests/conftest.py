import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from knora_v1.fixtures import FixtureStore, get_fixture_store
from tests.constants import BOOK_CLASS_IRI, BOOK_IRI, PAGE_IRI, SEARCH_STRING, VOCABULARY_IRI

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# (fixture kind, key, payload file)
CAPTURED = [
    ("resources", PAGE_IRI, "resource_full.json"),
    ("resources_info", PAGE_IRI, "resource_info.json"),
    ("resources_rights", PAGE_IRI, "resource_rights.json"),
    ("resources_context", BOOK_IRI, "resource_context.json"),
    ("properties", BOOK_IRI, "properties.json"),
    ("resourcetype", BOOK_CLASS_IRI, "resourcetype.json"),
    ("resourcetypes", VOCABULARY_IRI, "resourcetypes.json"),
    ("propertylists_restype", BOOK_CLASS_IRI, "propertylists_restype.json"),
    ("propertylists_vocabulary", VOCABULARY_IRI, "propertylists_vocabulary.json"),
    ("vocabularies", "all", "vocabularies.json"),
    ("search", SEARCH_STRING, "search.json"),
]


def read_payload(name):
    with (FIXTURES_DIR / name).open(encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def load_payload():
    return read_payload


@pytest.fixture
def fixture_store(tmp_path):
    """Fixture store holding every captured payload."""
    store = FixtureStore(tmp_path / "fixtures")
    for kind, key, name in CAPTURED:
        store.save(kind, key, read_payload(name))
    return store


@pytest.fixture
def app(fixture_store):
    """Fixture server reading from the temporary store."""
    from knora_v1.main import app

    app.dependency_overrides[get_fixture_store] = lambda: fixture_store
    yield app

    # Cleanup
    app.dependency_overrides.clear()


@pytest.fixture
def server(app):
    return TestClient(app)
