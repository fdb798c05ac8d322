"""
MDX page rendering of DeclarationRecords.

Pages target docz: front matter, an optional live ``<Playground>`` example and
one property table per bucket.
"""
import logging
import re
from typing import List

from propdoc.core.config import config
from propdoc.models.records import DeclarationRecord, PropertyRecord

logger = logging.getLogger(__name__)

_CESIUM_REFERENCE = re.compile(r'Cesium\.(.+?)( |<|>|,|\[|\)|$)', re.MULTILINE)

SECTIONS = (
    ('Cesium properties', 'cesium_props'),
    ('Cesium read only properties', 'cesium_readonly_props'),
    ('Cesium events', 'cesium_events'),
    ('Other properties', 'props'),
)


def format_type(type_text: str) -> str:
    """Link Cesium types, escape table and HTML characters, and fold lines."""
    base_url = config.get('render', 'cesium_doc_url')
    linked = _CESIUM_REFERENCE.sub(
        lambda m: f"[Cesium.{m.group(1)}]({base_url}/{m.group(1)}.html){m.group(2)}",
        type_text,
    )
    escaped = linked.replace('|', '&#124;').replace('<', '&lt;').replace('>', '&gt;')
    return ' '.join(line.strip() for line in escaped.split('\n'))


def render_prop_table(props: List[PropertyRecord]) -> str:
    """
    Render a Markdown table of the visible properties.

    Args:
        props: Properties of one bucket

    Returns:
        The table, or ``N/A`` when the bucket is empty
    """
    if not props:
        return 'N/A'

    rows = [
        f"| {p.name} | {format_type(p.type)} | {'Required. ' if p.required else ''}{p.description or ''} |"
        for p in props
        if not p.hidden
    ]
    return '\n'.join(['| Property | Type | Description |', '|--|--|--|', *rows]).strip()


def _indent(text: str, prefix: str = '  ') -> str:
    return '\n'.join(prefix + line for line in text.split('\n'))


def render_declaration(record: DeclarationRecord) -> str:
    """
    Render the documentation page of one component.

    Args:
        record: Reconciled declaration record

    Returns:
        MDX page text
    """
    name = record.name
    base_url = config.get('render', 'cesium_doc_url')
    uses_widget = bool(record.example and '<CesiumWidget' in record.example)
    host = 'CesiumWidget' if uses_widget else 'Viewer'

    parts: List[str] = [
        '---',
        f'name: {name}',
        f'route: /components/{name}',
        f"menu: {config.get('render', 'menu')}",
        '---',
    ]
    if record.example:
        parts += ['', 'import { Playground } from "docz";', f'import {host} from "../components/{host}";']
        if record.example_imports:
            parts.append(record.example_imports)
        parts.append('')
    parts.append(f'# {name}')
    if record.summary:
        parts += ['', record.summary, '']
    parts.append(f'**Cesium element**: [{name}]({base_url}/{name}.html)')
    if record.example:
        parts += ['', '<Playground>', _indent(record.example), '</Playground>']
    if record.scope:
        parts += ['', '## Available scope', '', record.scope]
    parts += ['', '## Properties']
    for title, field in SECTIONS:
        parts += ['', f'### {title}', '', render_prop_table(getattr(record, field))]

    logger.debug(f"Rendered page for {name}")
    return '\n'.join(parts).strip() + '\n'
