# controllers/ontology_controller.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from knora_v1.fixtures import FixtureStore, get_fixture_store

#Models
from knora_v1.models.resource_formats import (
    PropertyTypesInResourceClassResponse,
    ResourceTypeResponse,
    ResourceTypesInVocabularyResponse,
    VocabularyResponse,
)

#Utilities
from knora_v1.utils.fixture_helper import load_response

router = APIRouter()

# The vocabulary list is a single fixture
VOCABULARIES_KEY = "all"


@router.get(
    "/resourcetypes",
    response_model=ResourceTypesInVocabularyResponse,
    response_model_exclude_unset=True,
)
async def get_resource_types(
    vocabulary: str = Query(...),
    store: FixtureStore = Depends(get_fixture_store),
):
    """Get the resource classes defined in a vocabulary."""
    return load_response(store, "resourcetypes", vocabulary, ResourceTypesInVocabularyResponse)


@router.get(
    "/resourcetypes/{resource_class_iri:path}",
    response_model=ResourceTypeResponse,
    response_model_exclude_unset=True,
)
async def get_resource_type(resource_class_iri: str, store: FixtureStore = Depends(get_fixture_store)):
    """Get a resource class and the property types it may have."""
    return load_response(store, "resourcetype", resource_class_iri, ResourceTypeResponse)


@router.get(
    "/propertylists",
    response_model=PropertyTypesInResourceClassResponse,
    response_model_exclude_unset=True,
)
async def get_property_types(
    restype: Optional[str] = Query(None),
    vocabulary: Optional[str] = Query(None),
    store: FixtureStore = Depends(get_fixture_store),
):
    """Get the property types of a resource class or, failing that, of a vocabulary."""
    if restype is not None:
        return load_response(store, "propertylists_restype", restype, PropertyTypesInResourceClassResponse)
    if vocabulary is not None:
        return load_response(store, "propertylists_vocabulary", vocabulary, PropertyTypesInResourceClassResponse)
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Either `restype` or `vocabulary` is required."
    )


@router.get(
    "/vocabularies",
    response_model=VocabularyResponse,
    response_model_exclude_unset=True,
)
async def get_vocabularies(store: FixtureStore = Depends(get_fixture_store)):
    return load_response(store, "vocabularies", VOCABULARIES_KEY, VocabularyResponse)
