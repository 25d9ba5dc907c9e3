from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from launchwatch.core.config import settings

DATABASE_URI = settings.SQLALCHEMY_DATABASE_URI

engine_kwargs = {"pool_pre_ping": True}
if DATABASE_URI.startswith("sqlite"):
    engine_kwargs = {"connect_args": {"check_same_thread": False}}
    # A private in-memory database must be shared by every session
    if DATABASE_URI in ("sqlite://", "sqlite:///:memory:"):
        engine_kwargs["poolclass"] = StaticPool

engine = create_engine(DATABASE_URI, **engine_kwargs)

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables that don't exist yet."""
    from launchwatch.db.base import Base

    Base.metadata.create_all(bind=engine)
