from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional

from launchwatch.api.errors import unwrap
from launchwatch.core.security import Identity, get_optional_identity
from launchwatch.db.session import get_db
from launchwatch.models.launch import LaunchStatus
from launchwatch.schemas import LaunchOut, SeedResponse, StatusUpdate
from launchwatch.services import launches
from launchwatch.services.live import ALL_TABLES, LAUNCH_TABLE, hub
from launchwatch.services.seed import seed_demo_data

router = APIRouter()


@router.get("/", response_model=List[LaunchOut])
def read_launches(db: Session = Depends(get_db)):
    """All launches, ordered by launch date."""
    return launches.list_launches(db)


@router.get("/upcoming", response_model=List[LaunchOut])
def read_upcoming(db: Session = Depends(get_db)):
    return launches.get_upcoming(db)


@router.get("/live", response_model=List[LaunchOut])
def read_live(db: Session = Depends(get_db)):
    return launches.get_live(db)


@router.get("/completed", response_model=List[LaunchOut])
def read_completed(db: Session = Depends(get_db)):
    return launches.get_completed(db)


@router.get("/status/{status}", response_model=List[LaunchOut])
def read_by_status(status: LaunchStatus, db: Session = Depends(get_db)):
    return launches.get_launches_by_status(db, status)


@router.post("/seed", response_model=SeedResponse)
def seed(background_tasks: BackgroundTasks, db: Session = Depends(get_db)):
    """Populate demo data if the launch table is empty."""
    created = seed_demo_data(db)
    if created:
        background_tasks.add_task(hub.publish, ALL_TABLES)
    return SeedResponse(seeded=created > 0, launches_created=created)


@router.get("/{launch_id}", response_model=LaunchOut)
def read_launch(launch_id: int, db: Session = Depends(get_db)):
    launch = launches.get_launch(db, launch_id)
    if launch is None:
        raise HTTPException(status_code=404, detail="Launch not found")
    return launch


@router.patch("/{launch_id}/status", status_code=204)
def update_status(
    launch_id: int,
    body: StatusUpdate,
    background_tasks: BackgroundTasks,
    identity: Optional[Identity] = Depends(get_optional_identity),
    db: Session = Depends(get_db),
):
    unwrap(launches.update_launch_status(db, identity, launch_id, body.status))
    background_tasks.add_task(hub.publish, {LAUNCH_TABLE})
