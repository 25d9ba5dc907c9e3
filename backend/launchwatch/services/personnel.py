from typing import List

from sqlalchemy.orm import Session

from launchwatch.models.personnel import Personnel


def get_personnel_by_launch(db: Session, launch_id: int) -> List[Personnel]:
    return db.query(Personnel).filter(Personnel.launch_id == launch_id).order_by(Personnel.id).all()
