"""
Extraction of documented properties from interface members.
"""
import logging
import re
from typing import Optional

from tree_sitter import Node

from propdoc.core.comments import normalize_comments
from propdoc.core.engine.ast_handler import ASTHandler
from propdoc.core.tags import parse_annotation
from propdoc.models.enums import Bucket
from propdoc.models.records import PropertyRecord

logger = logging.getLogger(__name__)

PROPERTY_NODE = 'property_signature'
OPTIONAL_TOKEN = '?'

# `(name: Hosting /* Alias */) => void` renders as `(name: Alias) => void`
_INLINE_DISPLAY_TYPE = re.compile(r':[^:]+?/\* (.+?) \*/(,|\))')
# `Hosting /* Alias */` as a whole property type renders as `: Alias`
_WHOLE_DISPLAY_TYPE = re.compile(r'^.+?\s*/\* ((?:(?!\*/).)+) \*/$', re.DOTALL)


def unwind_display_type(type_text: str) -> str:
    """
    Replace structural types with the display aliases written after them.

    Args:
        type_text: Declared type text, without the leading colon

    Returns:
        Type text to show in the documentation
    """
    text = _INLINE_DISPLAY_TYPE.sub(r': \1\2', type_text.strip())
    whole = _WHOLE_DISPLAY_TYPE.match(text)
    if whole:
        return f': {whole.group(1).strip()}'
    return text


def _structural_type(node: Node, ast_handler: ASTHandler, code_bytes: bytes) -> str:
    annotation = ast_handler.find_child_by_field_name(node, 'type')
    if annotation is None:
        return ''
    type_node = annotation.named_children[0] if annotation.named_children else annotation
    end_byte = ast_handler.get_trailing_block_comments_end(annotation, node)
    return code_bytes[type_node.start_byte:end_byte].decode('utf8')


def extract_property(node: Node, default_bucket: Bucket, ast_handler: ASTHandler,
                     code_bytes: bytes) -> Optional[PropertyRecord]:
    """
    Build the PropertyRecord of one ``property_signature`` node.

    Args:
        node: The property signature
        default_bucket: Bucket of the enclosing interface
        ast_handler: Handler used to read node text and comments
        code_bytes: Source code as bytes

    Returns:
        The record, or None when the property name is not a plain identifier
        (computed, string or numeric keys are not documented).
    """
    name_node = ast_handler.find_child_by_field_name(node, 'name')
    if name_node is None or name_node.type != 'property_identifier':
        logger.debug(f"Skipping property with unsupported name shape at line {node.start_point[0] + 1}")
        return None
    name = ast_handler.get_node_text(name_node, code_bytes)

    blocks = normalize_comments(ast_handler.get_leading_comments(node, code_bytes))
    annotation = parse_annotation(line for block in blocks for line in block)

    optional = ast_handler.has_child_of_type(node, OPTIONAL_TOKEN)
    if annotation.explicit_type is not None:
        display_type = annotation.explicit_type
    else:
        display_type = unwind_display_type(_structural_type(node, ast_handler, code_bytes))

    return PropertyRecord(
        name=name,
        required=not optional,
        type=display_type,
        hidden=annotation.hidden,
        description=annotation.description,
        bucket=annotation.bucket or default_bucket,
    )
