"""Message components shared by every Knora API v1 response."""

from enum import IntEnum
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr
from typing import Annotated, List, Dict, Any, Optional, Union


class ApiStatusCode(IntEnum):
    """Values of the `status` field of a response."""
    OK = 0
    INVALID_REQUEST_METHOD = 1
    CREDENTIALS_NOT_VALID = 2
    NO_RIGHTS_FOR_OPERATION = 3
    INTERNAL_SALSAH_ERROR = 4
    NO_PROPERTIES = 5
    NOT_IN_USERDATA = 6
    RESOURCE_ID_MISSING = 7
    UNKNOWN_VOCABULARY = 8
    NO_NODES_FOUND = 9
    API_ENDPOINT_NOT_FOUND = 10
    INVALID_REQUEST_TYPE = 11


class KnoraModel(BaseModel):
    # Unknown fields are kept so that a payload survives a round trip
    model_config = ConfigDict(extra="allow")


def to_payload(model: BaseModel) -> Dict[str, Any]:
    """Serialize a response back to JSON-compatible data.

    Fields that were absent in the parsed payload stay absent.
    """
    return model.model_dump(mode="json", exclude_unset=True)


class UserData(KnoraModel):
    email: Optional[str] = None
    username: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    password: Optional[str] = None  # always null in responses
    token: Optional[str] = None
    user_id: Optional[str] = None
    lang: Optional[str] = None
    projects: Optional[List[str]] = None
    projects_info: Optional[List[Dict[str, Any]]] = None


class BasicResponse(KnoraModel):
    status: int
    userdata: Optional[UserData] = None

    @property
    def ok(self) -> bool:
        return self.status == ApiStatusCode.OK


class LocationItem(KnoraModel):
    """A digital representation (file) attached to a resource."""
    format_name: str
    origname: str
    path: str
    protocol: str
    nx: Optional[int] = None  # width in pixels
    ny: Optional[int] = None  # height in pixels
    duration: Optional[float] = None
    fps: Optional[float] = None


class RichTextValue(KnoraModel):
    utf8str: str
    textattr: str
    resource_reference: Optional[List[str]] = None


class DateValue(KnoraModel):
    dateval1: str
    dateval2: str
    calendar: str
    era1: Optional[str] = None
    era2: Optional[str] = None


class IntervalValue(KnoraModel):
    timeval1: float
    timeval2: float


# Strings cover IRIs, colors, geometries, list nodes and geonames. Any other
# object is kept as a plain dict.
KnoraValue = Annotated[
    Union[
        RichTextValue,
        DateValue,
        IntervalValue,
        StrictBool,
        StrictInt,
        StrictFloat,
        StrictStr,
        Dict[str, Any],
    ],
    Field(union_mode="left_to_right"),
]
