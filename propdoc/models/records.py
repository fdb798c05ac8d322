"""
Models for extracted documentation.
Provides the per-property and per-component records handed to the renderer.
"""
import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .enums import Bucket, DocField

logger = logging.getLogger(__name__)

# (native event name, prop name) pairs read from the event mapping initializer
EventNameMapping = List[Tuple[str, str]]

BUCKET_FIELDS = {
    Bucket.CESIUM_PROPS: 'cesium_props',
    Bucket.CESIUM_READONLY_PROPS: 'cesium_readonly_props',
    Bucket.CESIUM_EVENTS: 'cesium_events',
    Bucket.PROPS: 'props',
}


class AnnotationRecord(BaseModel):
    """Facts derived from the comments preceding a single property"""
    bucket: Optional[Bucket] = None
    hidden: bool = False
    explicit_type: Optional[str] = None
    description: str = ''


class PropertyRecord(BaseModel):
    """One documented property of a component"""
    name: str
    required: bool
    type: str
    hidden: bool = False
    description: str = ''
    bucket: Bucket = Field(default=Bucket.PROPS, exclude=True)


class DeclarationRecord(BaseModel):
    """Documentation unit extracted from one component source file"""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    cesium_props: List[PropertyRecord] = Field(default_factory=list, alias='cesiumProps')
    cesium_readonly_props: List[PropertyRecord] = Field(default_factory=list, alias='cesiumReadonlyProps')
    cesium_events: List[PropertyRecord] = Field(default_factory=list, alias='cesiumEvents')
    props: List[PropertyRecord] = Field(default_factory=list)
    summary: Optional[str] = None
    scope: Optional[str] = None
    example: Optional[str] = None
    example_imports: Optional[str] = None

    def bucket(self, bucket: Bucket) -> List[PropertyRecord]:
        """Return the live property list for ``bucket``."""
        return getattr(self, BUCKET_FIELDS[Bucket(bucket)])

    def add_property(self, prop: PropertyRecord) -> None:
        """File ``prop`` under its own resolved bucket."""
        self.bucket(prop.bucket).append(prop)

    def set_doc_field(self, field: DocField, value: str) -> None:
        """Set a document level field; a later value replaces an earlier one."""
        current = getattr(self, field.value)
        if current is not None and current != value:
            logger.debug(f"Overwriting {field.value} of {self.name}")
        setattr(self, field.value, value)

    @property
    def all_properties(self) -> List[PropertyRecord]:
        """All properties across buckets, in bucket order"""
        return [*self.cesium_props, *self.cesium_readonly_props, *self.cesium_events, *self.props]

    def to_dict(self) -> dict:
        """Serialize using the camelCase bucket names."""
        return self.model_dump(by_alias=True)
