from .enums import Bucket, DocField
from .records import AnnotationRecord, DeclarationRecord, EventNameMapping, PropertyRecord

__all__ = [
    "AnnotationRecord",
    "Bucket",
    "DeclarationRecord",
    "DocField",
    "EventNameMapping",
    "PropertyRecord",
]
