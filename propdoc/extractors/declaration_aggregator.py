"""
Assembly of a component's DeclarationRecord from the top level of its source.
"""
import logging
from typing import Optional, Tuple

from tree_sitter import Node

from propdoc.core.comments import normalize_comments
from propdoc.core.config import config
from propdoc.core.engine.ast_handler import ASTHandler, COMMENT_NODE
from propdoc.core.tags import parse_document_tags
from propdoc.extractors.property_extractor import PROPERTY_NODE, extract_property
from propdoc.models.enums import Bucket
from propdoc.models.records import DeclarationRecord, EventNameMapping

logger = logging.getLogger(__name__)

# Checked in order; the first suffix that matches selects the default bucket.
INTERFACE_SUFFIX_RULES: Tuple[Tuple[str, Bucket], ...] = (
    ('CesiumProps', Bucket.CESIUM_PROPS),
    ('CesiumReadonlyProps', Bucket.CESIUM_READONLY_PROPS),
    ('CesiumEvents', Bucket.CESIUM_EVENTS),
    ('Props', Bucket.PROPS),
)

VARIABLE_NODES = ('lexical_declaration', 'variable_declaration')


def default_bucket_for(interface_name: str) -> Optional[Bucket]:
    """
    Select the default bucket of an interface by its name suffix.

    Returns:
        The bucket, or None when the interface is not a documentation source
    """
    for suffix, bucket in INTERFACE_SUFFIX_RULES:
        if len(interface_name) > len(suffix) and interface_name.endswith(suffix):
            return bucket
    return None


def _unwrap_export(node: Node) -> Node:
    if node.type == 'export_statement':
        declaration = node.child_by_field_name('declaration')
        if declaration is not None:
            return declaration
    return node


def _string_value(node: Node, ast_handler: ASTHandler, code_bytes: bytes) -> Optional[str]:
    if node is None or node.type != 'string':
        return None
    return ast_handler.get_node_text(node, code_bytes)[1:-1]


def _collect_properties(record: DeclarationRecord, interface: Node, ast_handler: ASTHandler,
                        code_bytes: bytes) -> None:
    name_node = ast_handler.find_child_by_field_name(interface, 'name')
    interface_name = ast_handler.get_node_text(name_node, code_bytes) if name_node else ''
    default_bucket = default_bucket_for(interface_name)
    if default_bucket is None:
        logger.debug(f"Ignoring interface '{interface_name}': no documentation suffix")
        return

    body = ast_handler.find_child_by_field_name(interface, 'body')
    if body is None:
        return
    for member in body.children:
        if member.type != PROPERTY_NODE:
            continue
        prop = extract_property(member, default_bucket, ast_handler, code_bytes)
        if prop is not None:
            record.add_property(prop)
    logger.debug(f"Collected interface '{interface_name}' as {default_bucket.value}")


def _collect_event_mapping(mapping: EventNameMapping, statement: Node, ast_handler: ASTHandler,
                           code_bytes: bytes) -> None:
    declarators = [child for child in statement.named_children if child.type == 'variable_declarator']
    if not declarators:
        return
    declarator = declarators[0]
    name_node = ast_handler.find_child_by_field_name(declarator, 'name')
    if name_node is None or ast_handler.get_node_text(name_node, code_bytes) != config.get('events', 'mapping_name'):
        return
    value = ast_handler.find_child_by_field_name(declarator, 'value')
    if value is None or value.type != 'object':
        logger.warning("Event mapping initializer is not an object literal; ignoring it")
        return

    for entry in value.named_children:
        if entry.type != 'pair':
            continue
        native_name = _string_value(ast_handler.find_child_by_field_name(entry, 'value'), ast_handler, code_bytes)
        key = ast_handler.find_child_by_field_name(entry, 'key')
        if key is not None and key.type == 'property_identifier':
            prop_name = ast_handler.get_node_text(key, code_bytes)
        else:
            prop_name = _string_value(key, ast_handler, code_bytes)
        if not native_name or not prop_name:
            continue
        mapping.append((native_name, prop_name))


def aggregate_declaration(name: str, root: Node, code_bytes: bytes,
                          ast_handler: ASTHandler) -> Tuple[DeclarationRecord, EventNameMapping]:
    """
    Walk the top-level nodes of one source file.

    Interfaces named by the suffix convention contribute their properties,
    the event mapping initializer contributes name pairs, and the comments in
    front of every top-level node are scanned for document tags. A document
    tag seen later in the file replaces an earlier one.

    Args:
        name: Component name, used as the record name
        root: Program node of the parsed source
        code_bytes: Source code as bytes
        ast_handler: Handler the tree was parsed with

    Returns:
        Tuple of (record, event name mapping)
    """
    record = DeclarationRecord(name=name)
    mapping: EventNameMapping = []

    for node in root.children:
        if node.type == COMMENT_NODE:
            continue
        declaration = _unwrap_export(node)
        if declaration.type == 'interface_declaration':
            _collect_properties(record, declaration, ast_handler, code_bytes)
        elif declaration.type in VARIABLE_NODES:
            _collect_event_mapping(mapping, declaration, ast_handler, code_bytes)

        blocks = normalize_comments(ast_handler.get_leading_comments(node, code_bytes))
        for field, value in parse_document_tags(blocks).items():
            record.set_doc_field(field, value)

    return record, mapping
