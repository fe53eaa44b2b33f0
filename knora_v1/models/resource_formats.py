"""Shapes of the Knora API v1 responses about resources and their ontology.

Each top-level response extends `BasicResponse` and adds the payload of one
endpoint variant:

    /v1/resources/{resourceIRI}                             ResourceFullResponse
    /v1/resources/{resourceIRI}?reqtype=info                ResourceInfoResponse
    /v1/resources/{resourceIRI}?reqtype=rights              ResourceRightsResponse
    /v1/resources/{resourceIRI}?reqtype=context             ResourceContextResponse
    /v1/properties/{resourceIRI}                            ResourcePropertiesResponse
    /v1/resourcetypes/{resourceClassIRI}                    ResourceTypeResponse
    /v1/resourcetypes?vocabulary={vocabularyIRI}            ResourceTypesInVocabularyResponse
    /v1/propertylists?restype=...|vocabulary=...            PropertyTypesInResourceClassResponse
    /v1/vocabularies                                        VocabularyResponse
    /v1/resources?searchstr=...                             ResourceLabelSearchResponse
"""

from enum import IntEnum
from pydantic import model_validator
from typing import List, Dict, Any, Optional, Union

from knora_v1.models.basic_components import BasicResponse, KnoraModel, KnoraValue, LocationItem
from knora_v1.utils.parallel_arrays import check_parallel_arrays, zip_parallel


class PropVal(KnoraModel):
    """A single property value (no parallel arrays)."""
    textval: str
    person_id: Optional[str] = None  # owner of the value
    lastmod: Optional[str] = None
    id: str  # IRI of the value
    comment: str
    lastmod_utc: Optional[str] = None
    value: KnoraValue


class Prop(KnoraModel):
    """A property with its values (no parallel arrays).

    If the requested resource has no instance of the property type, only the
    property type is described and `values` is absent.
    """
    valuetype: str
    is_annotation: str  # obsolete
    valuetype_id: str
    label: str
    guielement: str
    attributes: str  # HTML attributes of the GUI element
    pid: str  # IRI of the property type
    values: Optional[List[PropVal]] = None


PROPERTY_PARALLEL_FIELDS = (
    "value_restype",
    "value_firstprops",
    "value_iconsrcs",
    "value_ids",
    "value_rights",
    "values",
    "comments",
)


class Property(KnoraModel):
    """A property whose values are described by parallel arrays.

    The Nth entry of `values`, `value_ids`, `value_rights`, `comments` and, for
    links, `value_restype`, `value_firstprops` and `value_iconsrcs` all belong
    to the Nth value.
    """
    regular_property: int  # obsolete
    value_restype: Optional[List[str]] = None  # class labels of linked resources
    guiorder: int
    value_firstprops: Optional[List[str]] = None  # labels of linked resources
    is_annotation: str  # obsolete
    valuetype_id: str
    label: str
    value_iconsrcs: Optional[List[str]] = None  # class icons of linked resources
    guielement: str
    attributes: str
    occurrence: str  # cardinality for the resource's class
    value_ids: Optional[List[str]] = None
    value_rights: Optional[List[int]] = None
    pid: str
    values: Optional[List[KnoraValue]] = None
    comments: Optional[List[str]] = None
    locations: Optional[List[LocationItem]] = None  # binary representations, full requests only

    @model_validator(mode="after")
    def parallel_arrays_match(self):
        check_parallel_arrays(self, PROPERTY_PARALLEL_FIELDS)
        return self

    def rows(self) -> List[Dict[str, Any]]:
        """One dict per value, keyed by the names of the populated arrays."""
        return zip_parallel(self, PROPERTY_PARALLEL_FIELDS)


class PermissionItem(KnoraModel):
    permission: str
    granted_to: str  # user group


# Property type IRI -> property, plus the plain `res_id` and `iconsrc` entries
Region = Dict[str, Union[Prop, str]]


class ResInfo(KnoraModel):
    """Information about a resource and its class."""
    locations: List[LocationItem]
    restype_label: str
    resclass_has_location: bool
    preview: LocationItem  # thumbnail or icon
    person_id: str
    value_of: Union[int, float, str]  # parent resource of a dependent resource
    permissions: List[PermissionItem]
    lastmod: str
    resclass_name: str
    regions: Optional[List[Region]] = None
    restype_description: str
    project_id: str
    locdata: LocationItem  # full quality representation
    restype_id: str
    firstproperty: str  # the resource's label
    restype_iconsrc: str
    restype_name: str


class ResData(KnoraModel):
    res_id: str
    restype_name: str
    restype_label: str
    iconsrc: str
    rights: int


class ExtResId(KnoraModel):
    id: str  # IRI of the referring resource
    pid: str  # IRI of the referring property type


class IncomingItem(KnoraModel):
    """A resource referring to the requested resource."""
    ext_res_id: ExtResId
    resinfo: ResInfo
    value: str  # first property of the referring resource


class ContextCode(IntEnum):
    NONE = 0
    PART_OF = 1  # e.g. a page of a book
    COMPOUND = 2  # e.g. a book that has pages


CONTEXT_PARALLEL_FIELDS = ("res_id", "firstprop", "locations", "preview", "region")


class Context(KnoraModel):
    """Position of a resource in a containment hierarchy.

    For a compound resource, `res_id`, `firstprop`, `locations`, `preview` and
    `region` describe its dependent resources positionally.
    """
    context: ContextCode
    canonical_res_id: str
    parent_res_id: Optional[str] = None
    parent_resinfo: Optional[ResInfo] = None
    resinfo: Optional[ResInfo] = None  # only with resinfo=true
    locations: Optional[List[List[LocationItem]]] = None
    preview: Optional[List[LocationItem]] = None
    firstprop: Optional[List[str]] = None
    region: Optional[List[Optional[str]]] = None  # obsolete
    resclass_name: Optional[str] = None  # obsolete
    res_id: Optional[List[str]] = None

    @model_validator(mode="after")
    def parallel_arrays_match(self):
        check_parallel_arrays(self, CONTEXT_PARALLEL_FIELDS)
        return self

    def dependents(self) -> List[Dict[str, Any]]:
        return zip_parallel(self, CONTEXT_PARALLEL_FIELDS)


class PropertyDefinition(KnoraModel):
    """A property type.

    `occurrence` is only given when the property type is requested for a
    resource class, not for a whole vocabulary.
    """
    name: str
    description: str
    valuetype_id: str
    label: str
    vocabulary: str
    attributes: str
    occurrence: Optional[str] = None
    id: str
    gui_name: str


class ResType(KnoraModel):
    name: str
    description: str
    label: str
    properties: List[PropertyDefinition]
    iconsrc: str


class PropItemForResType(KnoraModel):
    id: str
    label: str


class ResTypeItem(KnoraModel):
    id: str
    label: str
    properties: List[PropItemForResType]


class VocabularyItem(KnoraModel):
    shortname: str
    description: str
    uri: str
    id: str
    project_id: str
    longname: str
    active: bool  # the vocabulary of the user's project


class ResourceLabelSearchItem(KnoraModel):
    id: str
    value: List[str]
    rights: int


class PropertyTypesInResourceClassResponse(BasicResponse):
    properties: List[PropertyDefinition]


class ResourceTypesInVocabularyResponse(BasicResponse):
    resourcetypes: List[ResTypeItem]


class ResourceTypeResponse(BasicResponse):
    restype_info: ResType


class ResourcePropertiesResponse(BasicResponse):
    properties: Dict[str, Prop]


class ResourceFullResponse(BasicResponse):
    resinfo: ResInfo
    resdata: ResData
    props: Dict[str, Property]
    incoming: List[IncomingItem]
    access: str


class ResourceInfoResponse(BasicResponse):
    rights: int
    resource_info: ResInfo


class ResourceRightsResponse(BasicResponse):
    rights: int


class ResourceContextResponse(BasicResponse):
    resource_context: Context


class VocabularyResponse(BasicResponse):
    vocabularies: List[VocabularyItem]


class ResourceLabelSearchResponse(BasicResponse):
    resources: List[ResourceLabelSearchItem]
