"""
Live query subscriptions over WebSocket.

Clients subscribe to a named query with arguments and receive its result
immediately. Whenever a mutation reports the tables it touched, every
subscription reading one of those tables is re-evaluated and the new result
is pushed if it differs from the last one sent.
"""

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional, Tuple

from fastapi import WebSocket, WebSocketDisconnect
from starlette.concurrency import run_in_threadpool

from launchwatch.db.session import SessionLocal
from launchwatch.models.comment import Comment
from launchwatch.models.event import LaunchEvent
from launchwatch.models.launch import Launch, LaunchStatus
from launchwatch.models.personnel import Personnel
from launchwatch.models.user import User
from launchwatch.schemas import CommentOut, EventOut, LaunchOut, PersonnelOut
from launchwatch.services import comments, events, launches, personnel

logger = logging.getLogger(__name__)

LAUNCH_TABLE = Launch.__tablename__
PERSONNEL_TABLE = Personnel.__tablename__
EVENT_TABLE = LaunchEvent.__tablename__
COMMENT_TABLE = Comment.__tablename__
USER_TABLE = User.__tablename__

ALL_TABLES = frozenset({LAUNCH_TABLE, PERSONNEL_TABLE, EVENT_TABLE, COMMENT_TABLE, USER_TABLE})


def _dump(schema, rows):
    return [schema.model_validate(r).model_dump(mode="json") for r in rows]


def _dump_one(schema, row):
    return schema.model_validate(row).model_dump(mode="json") if row is not None else None


@dataclass(frozen=True)
class QueryDef:
    run: Callable[..., Any]
    tables: FrozenSet[str]
    params: Dict[str, Callable[[Any], Any]] = field(default_factory=dict)

    def bind(self, args: Optional[dict]) -> dict:
        """Validate and coerce client-supplied args. Raises ValueError."""
        args = args or {}
        if not isinstance(args, dict):
            raise ValueError("args must be an object")
        unknown = set(args) - set(self.params)
        if unknown:
            raise ValueError(f"Unexpected args: {', '.join(sorted(unknown))}")
        bound = {}
        for name, coerce in self.params.items():
            if name not in args:
                raise ValueError(f"Missing arg: {name}")
            try:
                bound[name] = coerce(args[name])
            except (TypeError, ValueError) as e:
                raise ValueError(f"Invalid {name}: {e}") from e
        return bound


QUERIES: Dict[str, QueryDef] = {
    "launches.list": QueryDef(
        run=lambda db: _dump(LaunchOut, launches.list_launches(db)),
        tables=frozenset({LAUNCH_TABLE}),
    ),
    "launches.get": QueryDef(
        run=lambda db, id: _dump_one(LaunchOut, launches.get_launch(db, id)),
        tables=frozenset({LAUNCH_TABLE}),
        params={"id": int},
    ),
    "launches.by_status": QueryDef(
        run=lambda db, status: _dump(LaunchOut, launches.get_launches_by_status(db, status)),
        tables=frozenset({LAUNCH_TABLE}),
        params={"status": LaunchStatus},
    ),
    "launches.upcoming": QueryDef(
        run=lambda db: _dump(LaunchOut, launches.get_upcoming(db)),
        tables=frozenset({LAUNCH_TABLE}),
    ),
    "launches.live": QueryDef(
        run=lambda db: _dump(LaunchOut, launches.get_live(db)),
        tables=frozenset({LAUNCH_TABLE}),
    ),
    "launches.completed": QueryDef(
        run=lambda db: _dump(LaunchOut, launches.get_completed(db)),
        tables=frozenset({LAUNCH_TABLE}),
    ),
    "personnel.by_launch": QueryDef(
        run=lambda db, launch_id: _dump(PersonnelOut, personnel.get_personnel_by_launch(db, launch_id)),
        tables=frozenset({PERSONNEL_TABLE}),
        params={"launch_id": int},
    ),
    "events.by_launch": QueryDef(
        run=lambda db, launch_id: _dump(EventOut, events.get_events_by_launch(db, launch_id)),
        tables=frozenset({EVENT_TABLE}),
        params={"launch_id": int},
    ),
    "comments.by_launch": QueryDef(
        run=lambda db, launch_id: _dump(CommentOut, comments.get_comments_by_launch(db, launch_id)),
        tables=frozenset({COMMENT_TABLE, USER_TABLE}),
        params={"launch_id": int},
    ),
}


def evaluate(query: QueryDef, args: dict) -> Any:
    db = SessionLocal()
    try:
        return query.run(db, **args)
    finally:
        db.close()


@dataclass
class Subscription:
    sub_id: str
    name: str
    query: QueryDef
    args: dict
    last: Any = None

    @property
    def key(self) -> Tuple[str, str]:
        return self.name, json.dumps(self.args, sort_keys=True, default=str)


class SubscriptionHub:
    """Tracks live query subscriptions per WebSocket connection."""

    def __init__(self):
        self._connections: Dict[WebSocket, Dict[str, Subscription]] = {}
        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop: Optional[asyncio.AbstractEventLoop] = None

    def _evaluation_lock(self) -> asyncio.Lock:
        # Evaluate-then-send must not interleave, or an older read can land last.
        # One lock per event loop; the module-level hub can outlive a loop.
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    @property
    def subscription_count(self) -> int:
        return sum(len(subs) for subs in self._connections.values())

    async def connect(self, websocket: WebSocket):
        await websocket.accept()
        self._connections[websocket] = {}
        logger.info(f"Subscriber connected ({self.connection_count} active)")

    def disconnect(self, websocket: WebSocket):
        if self._connections.pop(websocket, None) is not None:
            logger.info(f"Subscriber disconnected ({self.connection_count} active)")

    async def subscribe(self, websocket: WebSocket, sub_id: str, name: str, args: Optional[dict] = None):
        query = QUERIES.get(name) if isinstance(name, str) else None
        if query is None:
            await websocket.send_json({"type": "error", "id": sub_id, "detail": f"Unknown query: {name}"})
            return
        try:
            bound = query.bind(args)
        except ValueError as e:
            await websocket.send_json({"type": "error", "id": sub_id, "detail": str(e)})
            return

        async with self._evaluation_lock():
            data = await run_in_threadpool(evaluate, query, bound)
            subscription = Subscription(sub_id=sub_id, name=name, query=query, args=bound, last=data)
            self._connections.setdefault(websocket, {})[sub_id] = subscription
            await websocket.send_json({"type": "result", "id": sub_id, "query": name, "data": data})

    def unsubscribe(self, websocket: WebSocket, sub_id: str) -> bool:
        subs = self._connections.get(websocket)
        if not subs:
            return False
        return subs.pop(sub_id, None) is not None

    async def publish(self, tables: Iterable[str]):
        """Re-evaluate subscriptions that read any of ``tables`` and push changes."""
        touched = frozenset(tables)
        fresh: Dict[Tuple[str, str], Any] = {}

        async with self._evaluation_lock():
            for websocket, subs in list(self._connections.items()):
                for subscription in list(subs.values()):
                    if not subscription.query.tables & touched:
                        continue
                    if subscription.key not in fresh:
                        fresh[subscription.key] = await run_in_threadpool(
                            evaluate, subscription.query, subscription.args
                        )
                    # Unsubscribed while we were evaluating
                    if subs.get(subscription.sub_id) is not subscription:
                        continue
                    data = fresh[subscription.key]
                    if data == subscription.last:
                        continue
                    subscription.last = data
                    try:
                        await websocket.send_json(
                            {"type": "result", "id": subscription.sub_id, "query": subscription.name, "data": data}
                        )
                    except (WebSocketDisconnect, RuntimeError) as e:
                        logger.warning(f"Dropping subscriber after failed send: {e}")
                        self.disconnect(websocket)
                        break


hub = SubscriptionHub()
