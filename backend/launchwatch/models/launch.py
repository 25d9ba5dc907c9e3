from sqlalchemy import Column, Integer, BigInteger, Float, String, Text, Enum
from sqlalchemy.orm import relationship
from launchwatch.db.base_class import Base
import enum


class LaunchStatus(str, enum.Enum):
    UPCOMING = "upcoming"
    LIVE = "live"
    COMPLETED = "completed"
    SCRUBBED = "scrubbed"


def enum_values(enum_cls):
    """Persist enum values ('upcoming') rather than member names ('UPCOMING')."""
    return [member.value for member in enum_cls]


class Launch(Base):
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    mission_patch = Column(String, nullable=True)
    rocket_name = Column(String, nullable=False)
    rocket_type = Column(String, nullable=False)
    launch_site = Column(String, nullable=False)
    # All timestamps are epoch milliseconds
    launch_date = Column(BigInteger, nullable=False, index=True)
    status = Column(
        Enum(LaunchStatus, values_callable=enum_values, native_enum=False, length=16),
        nullable=False,
        index=True,
    )
    description = Column(Text, nullable=False)
    payload_type = Column(String, nullable=False)
    payload_mass = Column(Float, nullable=True)  # kg
    orbit_type = Column(String, nullable=False)
    livestream_url = Column(String, nullable=True)
    created_at = Column(BigInteger, nullable=False)
    updated_at = Column(BigInteger, nullable=False)

    personnel = relationship("Personnel", back_populates="launch")
    events = relationship("LaunchEvent", back_populates="launch")
    comments = relationship("Comment", back_populates="launch")
