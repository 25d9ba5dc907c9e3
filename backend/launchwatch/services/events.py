import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from launchwatch.core.clock import now_ms
from launchwatch.core.security import Identity
from launchwatch.models.event import EventType, LaunchEvent
from launchwatch.models.launch import Launch
from launchwatch.services.results import ErrorKind, Result

logger = logging.getLogger(__name__)


def get_events_by_launch(db: Session, launch_id: int) -> List[LaunchEvent]:
    """Timeline for a launch, most recent first."""
    return (
        db.query(LaunchEvent)
        .filter(LaunchEvent.launch_id == launch_id)
        .order_by(LaunchEvent.timestamp.desc(), LaunchEvent.id.desc())
        .all()
    )


def add_event(
    db: Session,
    identity: Optional[Identity],
    launch_id: int,
    title: str,
    description: str,
    event_type: EventType,
    now: Optional[int] = None,
) -> Result[int]:
    """Append a live timeline entry. Any authenticated caller may post one."""
    if identity is None:
        return Result.failure(ErrorKind.UNAUTHENTICATED)
    if db.get(Launch, launch_id) is None:
        return Result.failure(ErrorKind.NOT_FOUND)

    event = LaunchEvent(
        launch_id=launch_id,
        timestamp=now if now is not None else now_ms(),
        title=title,
        description=description,
        event_type=EventType(event_type),
        is_live=True,
    )
    db.add(event)
    db.commit()

    logger.info(f"Event '{title}' ({event.event_type.value}) added to launch {launch_id}")
    return Result.success(event.id)
