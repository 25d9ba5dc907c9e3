from sqlalchemy import Column, Integer, BigInteger, String, Text, Boolean, Enum, ForeignKey
from sqlalchemy.orm import relationship
from launchwatch.db.base_class import Base
from launchwatch.models.launch import enum_values
import enum


class EventType(str, enum.Enum):
    MILESTONE = "milestone"
    UPDATE = "update"
    ALERT = "alert"
    SUCCESS = "success"
    ANOMALY = "anomaly"


class LaunchEvent(Base):
    """Timeline entry for a launch (milestones, updates, anomalies...)."""
    id = Column(Integer, primary_key=True, index=True)
    launch_id = Column(Integer, ForeignKey("launch.id"), nullable=False, index=True)
    timestamp = Column(BigInteger, nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    event_type = Column(
        Enum(EventType, values_callable=enum_values, native_enum=False, length=16),
        nullable=False,
    )
    is_live = Column(Boolean, nullable=False, default=True)

    launch = relationship("Launch", back_populates="events")
