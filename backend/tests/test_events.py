"""Tests for timeline events."""

from launchwatch.core.clock import MINUTE_MS
from launchwatch.models import EventType
from launchwatch.services.events import add_event, get_events_by_launch
from launchwatch.services.results import ErrorKind

from conftest import SEED_TIME


def test_added_event_is_most_recent(db, seeded, make_identity):
    live = seeded["Transporter-12"]

    result = add_event(
        db,
        make_identity(),
        live.id,
        "Payload Deploy",
        "First customer satellite released.",
        EventType.UPDATE,
        now=SEED_TIME + MINUTE_MS,
    )

    assert result.ok
    events = get_events_by_launch(db, live.id)
    assert len(events) == 7
    assert events[0].id == result.value
    assert events[0].title == "Payload Deploy"
    assert events[0].event_type == EventType.UPDATE
    assert events[0].is_live is True


def test_add_event_on_launch_without_timeline(db, seeded, make_identity):
    launch_id = seeded["Starship Flight 7"].id

    add_event(db, make_identity(), launch_id, "Static fire", "Full-duration static fire complete.", "success")

    events = get_events_by_launch(db, launch_id)
    assert [e.title for e in events] == ["Static fire"]


def test_add_event_requires_identity(db, seeded):
    result = add_event(db, None, seeded["CRS-31"].id, "Hold", "Weather hold.", EventType.ALERT)

    assert result.error == ErrorKind.UNAUTHENTICATED


def test_add_event_unknown_launch(db, seeded, make_identity):
    result = add_event(db, make_identity(), 9999, "Hold", "Weather hold.", EventType.ALERT)

    assert result.error == ErrorKind.NOT_FOUND
