"""
Knora API v1 client returning typed responses
"""
import logging
import os
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
from dotenv import load_dotenv
from pydantic import ValidationError

from knora_v1.models.basic_components import ApiStatusCode, BasicResponse
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
from knora_v1.utils.endpoints import parse_response

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3333"
DEFAULT_TIMEOUT = 30.0


class KnoraApiError(Exception):
    """Raised when a request fails or the response is not usable"""

    def __init__(self, message: str, status_code: Optional[int] = None, api_status: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
        self.api_status = api_status


def encode_iri(iri: str) -> str:
    """URL-encode an IRI as a single path segment."""
    return quote(iri, safe="")


class KnoraClient:
    """
    Client for the GET endpoints of Knora API v1.
    Pass `http_client` to reuse a configured httpx.Client; it is then not closed by this client.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or os.getenv("KNORA_API_URL") or DEFAULT_API_URL).rstrip("/")
        if timeout is None:
            timeout = float(os.getenv("KNORA_TIMEOUT", DEFAULT_TIMEOUT))
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout)

    def close(self):
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> BasicResponse:
        params = {key: value for key, value in (params or {}).items() if value is not None}
        url = f"{self.base_url}/v1/{path}"
        logger.debug("GET %s %s", url, params)

        try:
            response = self._client.get(url, params=params)
        except httpx.HTTPError as e:
            raise KnoraApiError(f"Request to {url} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code >= 400:
            message = payload.get("error") if isinstance(payload, dict) else None
            raise KnoraApiError(
                message or f"GET {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
                api_status=payload.get("status") if isinstance(payload, dict) else None,
            )
        if not isinstance(payload, dict):
            raise KnoraApiError(f"GET {url} did not return a JSON object", status_code=response.status_code)

        api_status = payload.get("status")
        if api_status != ApiStatusCode.OK:
            logger.warning("Knora returned status %s for %s", api_status, url)
            raise KnoraApiError(
                payload.get("error") or f"Knora returned status {api_status}",
                status_code=response.status_code,
                api_status=api_status,
            )

        try:
            return parse_response(path, params, payload)
        except ValidationError as e:
            raise KnoraApiError(f"Unexpected response format for {url}: {e}", status_code=response.status_code) from e

    def get_resource(self, resource_iri: str) -> ResourceFullResponse:
        return self._get(f"resources/{encode_iri(resource_iri)}")

    def get_resource_info(self, resource_iri: str) -> ResourceInfoResponse:
        return self._get(f"resources/{encode_iri(resource_iri)}", {"reqtype": "info"})

    def get_resource_rights(self, resource_iri: str) -> ResourceRightsResponse:
        return self._get(f"resources/{encode_iri(resource_iri)}", {"reqtype": "rights"})

    def get_resource_context(self, resource_iri: str, resinfo: bool = False) -> ResourceContextResponse:
        params = {"reqtype": "context", "resinfo": "true" if resinfo else None}
        return self._get(f"resources/{encode_iri(resource_iri)}", params)

    def get_properties(self, resource_iri: str) -> ResourcePropertiesResponse:
        return self._get(f"properties/{encode_iri(resource_iri)}")

    def get_resource_type(self, resource_class_iri: str) -> ResourceTypeResponse:
        return self._get(f"resourcetypes/{encode_iri(resource_class_iri)}")

    def get_resource_types(self, vocabulary: str) -> ResourceTypesInVocabularyResponse:
        return self._get("resourcetypes", {"vocabulary": vocabulary})

    def get_property_types(
        self, restype: Optional[str] = None, vocabulary: Optional[str] = None
    ) -> PropertyTypesInResourceClassResponse:
        """Property types of a resource class or of a whole vocabulary (give exactly one)."""
        if (restype is None) == (vocabulary is None):
            raise ValueError("Give exactly one of restype or vocabulary")
        return self._get("propertylists", {"restype": restype, "vocabulary": vocabulary})

    def get_vocabularies(self) -> VocabularyResponse:
        return self._get("vocabularies")

    def search_labels(
        self,
        searchstr: str,
        restype_id: Optional[str] = None,
        numprops: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> ResourceLabelSearchResponse:
        """Resources whose label matches `searchstr`."""
        params = {"searchstr": searchstr, "restype_id": restype_id, "numprops": numprops, "limit": limit}
        return self._get("resources", params)
