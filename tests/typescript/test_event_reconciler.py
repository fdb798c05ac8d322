import pytest

from propdoc import DeclarationRecord, PropDoc, PropertyRecord
from propdoc.extractors.event_reconciler import event_reference, reconcile_events
from propdoc.models import Bucket

WIDGET_SOURCE = '''
export interface WidgetCesiumEvents {
  show: () => void;
  // Fired when hidden.
  hide: () => void;
}

export const cesiumEventProps = {
  onShow: "show",
  onHide: "hide",
  onMissing: "missing",
};
'''


def _event(name, description=''):
    return PropertyRecord(name=name, required=True, type='() => void',
                          description=description, bucket=Bucket.CESIUM_EVENTS)


@pytest.fixture
def record():
    return DeclarationRecord(name='Widget', cesium_events=[_event('show'), _event('hide', 'Authored.')])


def test_missing_description_is_backfilled():
    record = PropDoc().parse('Widget', WIDGET_SOURCE)
    show = record.cesium_events[0]
    assert show.name == 'show'
    assert show.description
    assert 'Widget' in show.description
    assert 'show' in show.description
    assert 'onShow' in show.description


def test_authored_description_is_kept():
    record = PropDoc().parse('Widget', WIDGET_SOURCE)
    assert record.cesium_events[1].description == 'Fired when hidden.'


def test_reference_text():
    assert event_reference('Widget', 'show', 'onShow') == (
        'Correspond to `show` event: '
        '[Widget#onShow](https://cesiumjs.org/Cesium/Build/Documentation/Widget.html#onShow)'
    )


def test_unmatched_mapping_entries_change_nothing(record):
    before = record.model_dump()
    reconcile_events(record, [('missing', 'onMissing')])
    assert record.model_dump() == before


def test_only_event_bucket_is_searched():
    record = DeclarationRecord(name='Widget', props=[PropertyRecord(name='show', required=True, type='boolean')])
    reconcile_events(record, [('show', 'onShow')])
    assert record.props[0].description == ''


def test_reconciliation_is_idempotent(record):
    mapping = [('show', 'onShow'), ('hide', 'onHide')]
    once = reconcile_events(record, mapping).model_dump()
    twice = reconcile_events(record, mapping).model_dump()
    assert once == twice
    assert record.cesium_events[1].description == 'Authored.'
