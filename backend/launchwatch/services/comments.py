import logging
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from launchwatch.core.clock import now_ms
from launchwatch.core.security import Identity
from launchwatch.models.comment import Comment
from launchwatch.models.launch import Launch
from launchwatch.models.user import User
from launchwatch.services.results import ErrorKind, Result

logger = logging.getLogger(__name__)

ANONYMOUS_NAME = "Anonymous"


@dataclass
class CommentView:
    """A comment row enriched with the author's display name."""
    id: int
    launch_id: int
    user_id: int
    content: str
    created_at: int
    user_name: str


def display_name(user: Optional[User]) -> str:
    """Local part of the author's email, or 'Anonymous'."""
    if user is None or not user.email:
        return ANONYMOUS_NAME
    return user.email.split("@")[0] or ANONYMOUS_NAME


def get_comments_by_launch(db: Session, launch_id: int) -> List[CommentView]:
    comments = (
        db.query(Comment)
        .options(joinedload(Comment.author))
        .filter(Comment.launch_id == launch_id)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
        .all()
    )
    return [
        CommentView(
            id=c.id,
            launch_id=c.launch_id,
            user_id=c.user_id,
            content=c.content,
            created_at=c.created_at,
            user_name=display_name(c.author),
        )
        for c in comments
    ]


def add_comment(
    db: Session,
    identity: Optional[Identity],
    launch_id: int,
    content: str,
    now: Optional[int] = None,
) -> Result[int]:
    """Post a comment. Content is stored as given; clients trim and reject blanks."""
    if identity is None:
        return Result.failure(ErrorKind.UNAUTHENTICATED)
    if db.get(Launch, launch_id) is None:
        return Result.failure(ErrorKind.NOT_FOUND)

    comment = Comment(
        launch_id=launch_id,
        user_id=identity.user_id,
        content=content,
        created_at=now if now is not None else now_ms(),
    )
    db.add(comment)
    db.commit()

    logger.info(f"User {identity.user_id} commented on launch {launch_id}")
    return Result.success(comment.id)


def remove_comment(db: Session, identity: Optional[Identity], comment_id: int) -> Result[None]:
    """Hard-delete a comment. Only its author may do this."""
    if identity is None:
        return Result.failure(ErrorKind.UNAUTHENTICATED)

    comment = db.get(Comment, comment_id)
    if comment is None:
        return Result.failure(ErrorKind.NOT_FOUND)
    if comment.user_id != identity.user_id:
        logger.warning(f"User {identity.user_id} tried to delete comment {comment_id} owned by {comment.user_id}")
        return Result.failure(ErrorKind.FORBIDDEN)

    db.delete(comment)
    db.commit()
    return Result.success()
