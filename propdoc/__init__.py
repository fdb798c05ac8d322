from .models.enums import Bucket, DocField
from .models.records import AnnotationRecord, DeclarationRecord, PropertyRecord
from .main import PropDoc
from .core.workspace import Workspace

__version__ = "1.0.0"
__all__ = [
    "AnnotationRecord",
    "Bucket",
    "DeclarationRecord",
    "DocField",
    "PropDoc",
    "PropertyRecord",
    "Workspace",
]
