import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from launchwatch.core.clock import now_ms
from launchwatch.core.security import Identity
from launchwatch.models.launch import Launch, LaunchStatus
from launchwatch.services.results import ErrorKind, Result

logger = logging.getLogger(__name__)


def list_launches(db: Session) -> List[Launch]:
    """All launches, earliest launch date first."""
    return db.query(Launch).order_by(Launch.launch_date.asc(), Launch.id.asc()).all()


def get_launch(db: Session, launch_id: int) -> Optional[Launch]:
    return db.get(Launch, launch_id)


def get_launches_by_status(db: Session, status: LaunchStatus) -> List[Launch]:
    """
    Launches whose status equals ``status``.

    The status index only guarantees the equality filter, so upcoming
    launches are re-sorted soonest first and completed ones most recent first.
    Other statuses keep index order.
    """
    status = LaunchStatus(status)
    launches = db.query(Launch).filter(Launch.status == status).order_by(Launch.id).all()

    if status == LaunchStatus.UPCOMING:
        return sorted(launches, key=lambda l: l.launch_date)
    if status == LaunchStatus.COMPLETED:
        return sorted(launches, key=lambda l: l.launch_date, reverse=True)
    return launches


def get_upcoming(db: Session) -> List[Launch]:
    return get_launches_by_status(db, LaunchStatus.UPCOMING)


def get_live(db: Session) -> List[Launch]:
    return get_launches_by_status(db, LaunchStatus.LIVE)


def get_completed(db: Session) -> List[Launch]:
    return get_launches_by_status(db, LaunchStatus.COMPLETED)


def update_launch_status(
    db: Session,
    identity: Optional[Identity],
    launch_id: int,
    status: LaunchStatus,
    now: Optional[int] = None,
) -> Result[None]:
    """
    Overwrite a launch's status. Any authenticated caller may do this and
    no transition ordering is enforced (completed -> upcoming is allowed).
    """
    if identity is None:
        return Result.failure(ErrorKind.UNAUTHENTICATED)

    launch = db.get(Launch, launch_id)
    if launch is None:
        return Result.failure(ErrorKind.NOT_FOUND)

    previous = launch.status
    launch.status = LaunchStatus(status)
    launch.updated_at = now if now is not None else now_ms()
    db.commit()

    logger.info(f"Launch {launch_id} status {previous.value} -> {launch.status.value} (user {identity.user_id})")
    return Result.success()
