from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from launchwatch.core.security import Identity, require_identity
from launchwatch.db.session import get_db
from launchwatch.services.dashboard import LaunchFilter, build_dashboard, build_launch_detail

router = APIRouter()


@router.get("/")
def read_dashboard(
    launch_filter: LaunchFilter = Query(LaunchFilter.ALL, alias="filter"),
    identity: Identity = Depends(require_identity),
    db: Session = Depends(get_db),
):
    """
    Launch manifest for the dashboard: cards for the selected filter,
    plus the live count and banner. Guests and signed-in users only.
    """
    return build_dashboard(db, launch_filter)


@router.get("/launches/{launch_id}")
def read_launch_detail(
    launch_id: int,
    identity: Identity = Depends(require_identity),
    db: Session = Depends(get_db),
):
    detail = build_launch_detail(db, launch_id)
    if detail is None:
        raise HTTPException(status_code=404, detail="Launch not found")
    return detail
