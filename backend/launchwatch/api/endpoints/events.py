from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from launchwatch.api.errors import unwrap
from launchwatch.core.security import Identity, get_optional_identity
from launchwatch.db.session import get_db
from launchwatch.schemas import CreatedResponse, EventCreate, EventOut
from launchwatch.services.events import add_event, get_events_by_launch
from launchwatch.services.live import EVENT_TABLE, hub

router = APIRouter()


@router.get("/{launch_id}/events", response_model=List[EventOut])
def read_events(launch_id: int, db: Session = Depends(get_db)):
    """Launch timeline, most recent event first."""
    return get_events_by_launch(db, launch_id)


@router.post("/{launch_id}/events", response_model=CreatedResponse, status_code=201)
def create_event(
    launch_id: int,
    body: EventCreate,
    background_tasks: BackgroundTasks,
    identity: Optional[Identity] = Depends(get_optional_identity),
    db: Session = Depends(get_db),
):
    event_id = unwrap(add_event(db, identity, launch_id, body.title, body.description, body.event_type))
    background_tasks.add_task(hub.publish, {EVENT_TABLE})
    return CreatedResponse(id=event_id)
