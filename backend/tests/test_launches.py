"""Tests for launch queries and status updates."""

import pytest

from launchwatch.models import LaunchStatus
from launchwatch.services import launches
from launchwatch.services.results import ErrorKind

from conftest import SEED_TIME


def test_list_launches_ascending_by_date(db, seeded):
    result = launches.list_launches(db)

    dates = [l.launch_date for l in result]
    assert len(result) == 6
    assert dates == sorted(dates)


def test_get_launch_absent_returns_none(db, seeded):
    assert launches.get_launch(db, 9999) is None
    assert launches.get_launch(db, seeded["CRS-31"].id).name == "CRS-31"


@pytest.mark.parametrize("status", list(LaunchStatus))
def test_by_status_returns_exact_subset(db, seeded, status):
    result = launches.get_launches_by_status(db, status)

    expected = {l.id for l in seeded.values() if l.status == status}
    assert {l.id for l in result} == expected
    assert all(l.status == status for l in result)


def test_upcoming_sorted_soonest_first(db, seeded):
    result = launches.get_upcoming(db)

    assert [l.name for l in result] == ["Starlink Group 9-14", "CRS-31", "Starship Flight 7"]


def test_completed_sorted_most_recent_first(db, seeded):
    result = launches.get_completed(db)

    assert [l.name for l in result] == ["Crew-9", "Bandwagon-2"]


def test_live_and_scrubbed(db, seeded):
    assert [l.name for l in launches.get_live(db)] == ["Transporter-12"]
    assert launches.get_launches_by_status(db, LaunchStatus.SCRUBBED) == []


def test_update_status_requires_identity(db, seeded):
    result = launches.update_launch_status(db, None, seeded["CRS-31"].id, LaunchStatus.SCRUBBED)

    assert not result.ok
    assert result.error == ErrorKind.UNAUTHENTICATED
    assert launches.get_launch(db, seeded["CRS-31"].id).status == LaunchStatus.UPCOMING


def test_update_status_missing_launch(db, seeded, make_identity):
    result = launches.update_launch_status(db, make_identity(), 9999, LaunchStatus.LIVE)

    assert result.error == ErrorKind.NOT_FOUND


def test_update_status_allows_any_transition(db, seeded, make_identity):
    crew = seeded["Crew-9"]
    later = SEED_TIME + 1234

    result = launches.update_launch_status(db, make_identity(), crew.id, LaunchStatus.UPCOMING, now=later)

    assert result.ok
    updated = launches.get_launch(db, crew.id)
    assert updated.status == LaunchStatus.UPCOMING
    assert updated.updated_at == later
    assert crew.id in {l.id for l in launches.get_upcoming(db)}
