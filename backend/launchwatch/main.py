from contextlib import asynccontextmanager
from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.concurrency import run_in_threadpool
import logging

from launchwatch.core.config import settings
from launchwatch.api.api import api_router
from launchwatch.db.session import SessionLocal, init_db
from launchwatch.services.countdown import CountdownTicker, format_countdown, is_counting
from launchwatch.services.launches import get_launch
from launchwatch.services.live import hub
from launchwatch.services.seed import seed_demo_data

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _seed():
    db = SessionLocal()
    try:
        seed_demo_data(db)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    if settings.SEED_ON_STARTUP:
        await run_in_threadpool(_seed)
    logger.info(f"{settings.PROJECT_NAME} API ready")
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Real-time launch tracking API: launch manifest, mission timelines, personnel and discussion.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)

@app.get("/")
def read_root():
    return {"message": "Welcome to LaunchWatch API", "status": "active", "version": "1.0.0"}

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(api_router, prefix=settings.API_V1_STR)


# ── WebSocket: live query subscriptions ──────────────────
@app.websocket("/ws/subscribe")
async def websocket_subscribe(websocket: WebSocket):
    """
    Live queries. Client sends:
      {"type": "subscribe", "id": "<sub id>", "query": "<name>", "args": {...}}
      {"type": "unsubscribe", "id": "<sub id>"}
    Server pushes {"type": "result", "id", "query", "data"} on subscribe and
    after every mutation that changes the result.
    """
    await hub.connect(websocket)
    try:
        while True:
            try:
                message = await websocket.receive_json()
            except ValueError:
                await websocket.send_json({"type": "error", "id": None, "detail": "Invalid JSON"})
                continue
            if not isinstance(message, dict):
                await websocket.send_json({"type": "error", "id": None, "detail": "Expected a JSON object"})
                continue

            kind = message.get("type")
            sub_id = str(message.get("id", ""))
            if kind == "subscribe":
                await hub.subscribe(websocket, sub_id, message.get("query"), message.get("args"))
            elif kind == "unsubscribe":
                hub.unsubscribe(websocket, sub_id)
            else:
                await websocket.send_json({"type": "error", "id": sub_id, "detail": f"Unknown message type: {kind}"})
    except WebSocketDisconnect:
        logger.info("Subscription socket closed by client")
    finally:
        hub.disconnect(websocket)


# ── WebSocket: per-launch countdown ──────────────────────
@app.websocket("/ws/launches/{launch_id}/countdown")
async def websocket_countdown(websocket: WebSocket, launch_id: int):
    await websocket.accept()

    def load():
        db = SessionLocal()
        try:
            return get_launch(db, launch_id)
        finally:
            db.close()

    launch = await run_in_threadpool(load)
    if launch is None:
        await websocket.send_json({"type": "error", "detail": "Launch not found"})
        await websocket.close(code=1008)
        return
    if not is_counting(launch.status):
        await websocket.send_json({
            "type": "countdown",
            "launch_id": launch.id,
            "active": False,
            "status": launch.status.value,
            "countdown": format_countdown(0),
        })
        await websocket.close()
        return

    ticker = CountdownTicker(
        launch.id,
        launch.launch_date,
        websocket.send_json,
        interval=settings.COUNTDOWN_INTERVAL_SECONDS,
    )
    ticker.start()
    try:
        while True:
            # Client messages are ignored; this only watches for disconnect
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info(f"Countdown socket for launch {launch_id} closed")
    finally:
        await ticker.cancel()
