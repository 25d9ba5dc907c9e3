from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from launchwatch.db.session import get_db
from launchwatch.schemas import PersonnelOut
from launchwatch.services.personnel import get_personnel_by_launch

router = APIRouter()


@router.get("/{launch_id}/personnel", response_model=List[PersonnelOut])
def read_personnel(launch_id: int, db: Session = Depends(get_db)):
    return get_personnel_by_launch(db, launch_id)
