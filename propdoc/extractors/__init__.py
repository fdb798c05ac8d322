from .declaration_aggregator import INTERFACE_SUFFIX_RULES, aggregate_declaration, default_bucket_for
from .event_reconciler import reconcile_events
from .property_extractor import extract_property, unwind_display_type

__all__ = [
    "INTERFACE_SUFFIX_RULES",
    "aggregate_declaration",
    "default_bucket_for",
    "extract_property",
    "reconcile_events",
    "unwind_display_type",
]
