"""
Backfilling of event descriptions from the declared event name mapping.
"""
import logging

from propdoc.core.config import config
from propdoc.models.records import DeclarationRecord, EventNameMapping

logger = logging.getLogger(__name__)


def event_reference(component: str, native_name: str, prop_name: str) -> str:
    """Generated description pointing at the Cesium documentation of an event."""
    base_url = config.get('render', 'cesium_doc_url')
    return f"Correspond to `{native_name}` event: [{component}#{prop_name}]({base_url}/{component}.html#{prop_name})"


def reconcile_events(record: DeclarationRecord, mapping: EventNameMapping) -> DeclarationRecord:
    """
    Give undocumented events a cross reference description.

    Authored descriptions are never replaced, so running this again on the
    same record changes nothing.

    Args:
        record: Declaration to update in place
        mapping: (native event name, prop name) pairs

    Returns:
        The same record
    """
    for native_name, prop_name in mapping:
        event = next((e for e in record.cesium_events if e.name == native_name), None)
        if event is None:
            logger.debug(f"No event property '{native_name}' in {record.name}")
            continue
        if not event.description:
            event.description = event_reference(record.name, native_name, prop_name)
    return record
