"""
Tag classification for annotation comments.

Every normalized comment line is classified into one of a small set of
variants; annotation and document records are then built by a left-to-right
reduce over those variants, so a later tag of the same kind replaces an
earlier one.
"""
import logging
import textwrap
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple, Union

from propdoc.models.enums import Bucket, DocField
from propdoc.models.records import AnnotationRecord

logger = logging.getLogger(__name__)

# Order matters: the first matching prefix wins.
BUCKET_TAGS: Tuple[Tuple[str, Bucket], ...] = (
    ('@CesiumProp', Bucket.CESIUM_PROPS),
    ('@CesiumReadonlyProp', Bucket.CESIUM_READONLY_PROPS),
    ('@CesiumEvent', Bucket.CESIUM_EVENTS),
    ('@prop', Bucket.PROPS),
)
HIDDEN_TAG = '@hidden'
TYPE_TAG = '@type '
# '@example-imports' must be tested before its prefix '@example'.
DOC_TAGS: Tuple[Tuple[str, DocField], ...] = (
    ('@summary', DocField.SUMMARY),
    ('@scope', DocField.SCOPE),
    ('@example-imports', DocField.EXAMPLE_IMPORTS),
    ('@example', DocField.EXAMPLE),
)


@dataclass(frozen=True)
class BucketTag:
    bucket: Bucket


@dataclass(frozen=True)
class HiddenTag:
    pass


@dataclass(frozen=True)
class TypeTag:
    text: str


@dataclass(frozen=True)
class DocTag:
    field: DocField
    text: str


@dataclass(frozen=True)
class DescriptionLine:
    text: str


ClassifiedLine = Union[BucketTag, HiddenTag, TypeTag, DocTag, DescriptionLine]


def classify_line(line: str) -> ClassifiedLine:
    """
    Classify one normalized comment line.

    Matching is prefix based and case sensitive on the stripped line. Tag-like
    tokens that are not part of the vocabulary are plain description text.
    """
    stripped = line.strip()
    for prefix, bucket in BUCKET_TAGS:
        if stripped.startswith(prefix):
            return BucketTag(bucket)
    if stripped.startswith(HIDDEN_TAG):
        return HiddenTag()
    if stripped.startswith(TYPE_TAG) and stripped[len(TYPE_TAG):].strip():
        return TypeTag(stripped[len(TYPE_TAG):].strip())
    for prefix, field in DOC_TAGS:
        if stripped.startswith(prefix):
            return DocTag(field, stripped[len(prefix):].strip())
    return DescriptionLine(stripped)


def is_tag_line(classified: ClassifiedLine) -> bool:
    return not isinstance(classified, DescriptionLine)


def parse_annotation(lines: Iterable[str]) -> AnnotationRecord:
    """
    Build the annotation of a property from the lines of all its comments.

    Args:
        lines: Normalized lines of every preceding comment block, in order

    Returns:
        AnnotationRecord with the last bucket and type tags applied
    """
    bucket: Optional[Bucket] = None
    hidden = False
    explicit_type: Optional[str] = None
    description: List[str] = []

    for line in lines:
        classified = classify_line(line)
        if isinstance(classified, BucketTag):
            bucket = classified.bucket
        elif isinstance(classified, HiddenTag):
            hidden = True
        elif isinstance(classified, TypeTag):
            explicit_type = classified.text
        elif line.strip():
            # Doc tags have no meaning on a property; keep them as text.
            description.append(line.strip())

    return AnnotationRecord(
        bucket=bucket,
        hidden=hidden,
        explicit_type=explicit_type,
        description=' '.join(description),
    )


def _finish_value(first: str, continuation: List[str]) -> str:
    body = textwrap.dedent('\n'.join(continuation))
    return '\n'.join(part for part in (first, body) if part).strip()


def parse_document_tags(blocks: Iterable[List[str]]) -> Dict[DocField, str]:
    """
    Collect component level fields from the comment blocks of a top-level node.

    A doc tag takes the rest of its line plus the following lines of the same
    block, up to the next tag or the end of the block. When a field is given
    more than once, the last value wins.

    Args:
        blocks: Normalized line lists, one per comment block

    Returns:
        Mapping of the fields found to their values
    """
    fields: Dict[DocField, str] = {}
    for lines in blocks:
        current: Optional[DocField] = None
        first = ''
        continuation: List[str] = []
        for line in lines:
            classified = classify_line(line)
            if is_tag_line(classified):
                if current is not None:
                    fields[current] = _finish_value(first, continuation)
                current = None
                if isinstance(classified, DocTag):
                    current, first, continuation = classified.field, classified.text, []
            elif current is not None:
                continuation.append(line)
        if current is not None:
            fields[current] = _finish_value(first, continuation)
    if fields:
        logger.debug(f"Found document tags: {', '.join(f.value for f in fields)}")
    return fields
