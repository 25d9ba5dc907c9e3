from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from launchwatch.api.errors import unwrap
from launchwatch.core.security import Identity, get_optional_identity
from launchwatch.db.session import get_db
from launchwatch.schemas import CommentCreate, CommentOut, CreatedResponse
from launchwatch.services.comments import add_comment, get_comments_by_launch, remove_comment
from launchwatch.services.live import COMMENT_TABLE, hub

router = APIRouter()


@router.get("/launches/{launch_id}/comments", response_model=List[CommentOut])
def read_comments(launch_id: int, db: Session = Depends(get_db)):
    """Mission discussion, newest first."""
    return get_comments_by_launch(db, launch_id)


@router.post("/launches/{launch_id}/comments", response_model=CreatedResponse, status_code=201)
def create_comment(
    launch_id: int,
    body: CommentCreate,
    background_tasks: BackgroundTasks,
    identity: Optional[Identity] = Depends(get_optional_identity),
    db: Session = Depends(get_db),
):
    comment_id = unwrap(add_comment(db, identity, launch_id, body.content))
    background_tasks.add_task(hub.publish, {COMMENT_TABLE})
    return CreatedResponse(id=comment_id)


@router.delete("/comments/{comment_id}", status_code=204)
def delete_comment(
    comment_id: int,
    background_tasks: BackgroundTasks,
    identity: Optional[Identity] = Depends(get_optional_identity),
    db: Session = Depends(get_db),
):
    unwrap(remove_comment(db, identity, comment_id))
    background_tasks.add_task(hub.publish, {COMMENT_TABLE})
