"""
Enumerations shared by the propdoc models.
"""
from enum import Enum

class Bucket(str, Enum):
    """Documentation table a property is rendered into"""
    CESIUM_PROPS = 'cesiumProps'
    CESIUM_READONLY_PROPS = 'cesiumReadonlyProps'
    CESIUM_EVENTS = 'cesiumEvents'
    PROPS = 'props'

class DocField(str, Enum):
    """Free-form, component level fields set by document tags"""
    SUMMARY = 'summary'
    SCOPE = 'scope'
    EXAMPLE = 'example'
    EXAMPLE_IMPORTS = 'example_imports'
