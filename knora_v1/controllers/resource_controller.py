# controllers/resource_controller.py
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, status

from knora_v1.fixtures import FixtureStore, get_fixture_store

#Models
from knora_v1.models.basic_components import to_payload
from knora_v1.models.resource_formats import (
    ResourceContextResponse,
    ResourceFullResponse,
    ResourceInfoResponse,
    ResourceLabelSearchResponse,
    ResourcePropertiesResponse,
    ResourceRightsResponse,
)

#Utilities
from knora_v1.utils.endpoints import RESOURCE_REQTYPES
from knora_v1.utils.fixture_helper import load_response

router = APIRouter()

# reqtype -> fixture kind
RESOURCE_FIXTURE_KINDS = {
    None: "resources",
    "info": "resources_info",
    "rights": "resources_rights",
    "context": "resources_context",
}


@router.get(
    "/resources",
    response_model=ResourceLabelSearchResponse,
    response_model_exclude_unset=True,
)
async def search_resources(
    searchstr: str = Query(...),
    restype_id: Optional[str] = Query(None),
    numprops: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    store: FixtureStore = Depends(get_fixture_store),
):
    """Search resources by label.

    The captured result for `searchstr` is cut down to `limit` resources and
    `numprops` values per resource.
    """
    response = load_response(store, "search", searchstr, ResourceLabelSearchResponse)
    resources = response.resources
    if limit is not None:
        resources = resources[:limit]
    if numprops is not None:
        resources = [item.model_copy(update={"value": item.value[:numprops]}) for item in resources]
    return response.model_copy(update={"resources": resources})


@router.get(
    "/resources/{resource_iri:path}",
    response_model=Union[
        ResourceFullResponse,
        ResourceInfoResponse,
        ResourceContextResponse,
        ResourceRightsResponse,
    ],
    response_model_exclude_unset=True,
)
async def get_resource(
    resource_iri: str,
    reqtype: Optional[str] = Query(None),
    resinfo: bool = Query(False),
    store: FixtureStore = Depends(get_fixture_store),
):
    """Get a resource, or its info, rights or context depending on `reqtype`."""
    if reqtype not in RESOURCE_REQTYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown reqtype: {reqtype}"
        )

    response = load_response(store, RESOURCE_FIXTURE_KINDS[reqtype], resource_iri, RESOURCE_REQTYPES[reqtype])
    payload = to_payload(response)
    if reqtype == "context" and not resinfo:
        payload["resource_context"].pop("resinfo", None)
    return payload


@router.get(
    "/properties/{resource_iri:path}",
    response_model=ResourcePropertiesResponse,
    response_model_exclude_unset=True,
)
async def get_properties(resource_iri: str, store: FixtureStore = Depends(get_fixture_store)):
    """Get the properties of a resource."""
    return load_response(store, "properties", resource_iri, ResourcePropertiesResponse)
