"""
Dashboard view composition.

Turns query results into the shapes the dashboard renders: filtered launch
cards with countdowns, the live banner, and the mission detail panel.
"""

import enum
from typing import List, Optional

from sqlalchemy.orm import Session

from launchwatch.core.clock import now_ms
from launchwatch.models.launch import Launch, LaunchStatus
from launchwatch.schemas import CommentOut, EventOut, LaunchOut, PersonnelOut
from launchwatch.services.comments import get_comments_by_launch
from launchwatch.services.countdown import format_countdown, format_date, is_counting, time_ago
from launchwatch.services.events import get_events_by_launch
from launchwatch.services.launches import get_launch, list_launches
from launchwatch.services.personnel import get_personnel_by_launch


class LaunchFilter(str, enum.Enum):
    ALL = "all"
    UPCOMING = "upcoming"
    LIVE = "live"
    COMPLETED = "completed"


def status_label(status: LaunchStatus) -> str:
    status = LaunchStatus(status)
    if status == LaunchStatus.LIVE:
        return "● LIVE"
    return status.value.upper()


def initials(name: str) -> str:
    return "".join(part[0] for part in name.split() if part)


def filter_launches(launches: List[Launch], launch_filter: LaunchFilter) -> List[Launch]:
    launch_filter = LaunchFilter(launch_filter)
    if launch_filter == LaunchFilter.ALL:
        return list(launches)
    return [l for l in launches if l.status.value == launch_filter.value]


def launch_card(launch: Launch, now: int) -> dict:
    card = {
        "id": launch.id,
        "name": launch.name,
        "status": launch.status.value,
        "status_label": status_label(launch.status),
        "rocket_name": launch.rocket_name,
        "launch_site": launch.launch_site,
        "launch_date": launch.launch_date,
        "date_display": format_date(launch.launch_date),
        "countdown": None,
    }
    if is_counting(launch.status):
        card["countdown"] = format_countdown(launch.launch_date - now)
    return card


def build_dashboard(db: Session, launch_filter: LaunchFilter = LaunchFilter.ALL, now: Optional[int] = None) -> dict:
    now = now if now is not None else now_ms()
    launches = list_launches(db)
    live = [l for l in launches if l.status == LaunchStatus.LIVE]

    banner = None
    if live:
        banner = {"launch_id": live[0].id, "message": f"{live[0].name} IS LIVE"}

    return {
        "filter": LaunchFilter(launch_filter).value,
        "live_count": len(live),
        "live_banner": banner,
        "launches": [launch_card(l, now) for l in filter_launches(launches, launch_filter)],
    }


def build_launch_detail(db: Session, launch_id: int, now: Optional[int] = None) -> Optional[dict]:
    """Mission detail panel, or None when the launch does not exist."""
    launch = get_launch(db, launch_id)
    if launch is None:
        return None
    now = now if now is not None else now_ms()

    personnel = [
        {**PersonnelOut.model_validate(p).model_dump(mode="json"), "initials": initials(p.name), "is_crew": p.is_astronaut}
        for p in get_personnel_by_launch(db, launch_id)
    ]
    events = [
        {**EventOut.model_validate(e).model_dump(mode="json"), "time_ago": time_ago(e.timestamp, now)}
        for e in get_events_by_launch(db, launch_id)
    ]
    comments = [
        {**CommentOut.model_validate(c).model_dump(mode="json"), "time_ago": time_ago(c.created_at, now)}
        for c in get_comments_by_launch(db, launch_id)
    ]

    return {
        "launch": LaunchOut.model_validate(launch).model_dump(mode="json"),
        "status_label": status_label(launch.status),
        "is_live": launch.status == LaunchStatus.LIVE,
        "countdown": format_countdown(launch.launch_date - now) if is_counting(launch.status) else None,
        "date_display": format_date(launch.launch_date),
        "personnel": personnel,
        "events": events,
        "comments": comments,
    }
