import logging
from typing import Any, Dict, Mapping, Optional, Type

from knora_v1.models.basic_components import BasicResponse
from knora_v1.models.resource_formats import (
    PropertyTypesInResourceClassResponse,
    ResourceContextResponse,
    ResourceFullResponse,
    ResourceInfoResponse,
    ResourceLabelSearchResponse,
    ResourcePropertiesResponse,
    ResourceRightsResponse,
    ResourceTypeResponse,
    ResourceTypesInVocabularyResponse,
    VocabularyResponse,
)

logger = logging.getLogger(__name__)

API_PREFIX = "v1"

RESOURCE_REQTYPES: Dict[Optional[str], Type[BasicResponse]] = {
    None: ResourceFullResponse,
    "info": ResourceInfoResponse,
    "rights": ResourceRightsResponse,
    "context": ResourceContextResponse,
}


class UnknownEndpointError(LookupError):
    pass


def _split_path(path: str):
    segments = path.strip("/").split("/")
    if segments[0] == API_PREFIX:
        segments = segments[1:]
    if not segments or not segments[0]:
        return None, None
    # An IRI that was not URL-encoded spans the remaining segments
    return segments[0], "/".join(segments[1:]) or None


def resolve_response_model(path: str, params: Optional[Mapping[str, Any]] = None) -> Type[BasicResponse]:
    """Return the response shape of a v1 GET request.

    `path` is the request path, with or without the `/v1` prefix, and
    `params` its query parameters.
    """
    params = params or {}
    endpoint, iri = _split_path(path)

    if endpoint == "resources":
        if iri is None:
            if "searchstr" in params:
                return ResourceLabelSearchResponse
        else:
            reqtype = params.get("reqtype")
            if reqtype in RESOURCE_REQTYPES:
                return RESOURCE_REQTYPES[reqtype]
    elif endpoint == "properties" and iri is not None:
        return ResourcePropertiesResponse
    elif endpoint == "resourcetypes":
        if iri is not None:
            return ResourceTypeResponse
        if "vocabulary" in params:
            return ResourceTypesInVocabularyResponse
    elif endpoint == "propertylists" and iri is None:
        if "restype" in params or "vocabulary" in params:
            return PropertyTypesInResourceClassResponse
    elif endpoint == "vocabularies" and iri is None:
        return VocabularyResponse

    raise UnknownEndpointError(f"No response format for GET {path} with {dict(params)}")


def parse_response(path: str, params: Optional[Mapping[str, Any]], payload: Dict[str, Any]) -> BasicResponse:
    """Validate `payload` against the response shape of the request."""
    model = resolve_response_model(path, params)
    logger.debug("Parsing %s payload as %s", path, model.__name__)
    return model.model_validate(payload)
