"""Pydantic models shared by the HTTP routes and the subscription hub."""

from typing import Optional

from pydantic import BaseModel, Field

from launchwatch.models.event import EventType
from launchwatch.models.launch import LaunchStatus


class LaunchOut(BaseModel):
    id: int
    name: str
    mission_patch: Optional[str] = None
    rocket_name: str
    rocket_type: str
    launch_site: str
    launch_date: int
    status: LaunchStatus
    description: str
    payload_type: str
    payload_mass: Optional[float] = None
    orbit_type: str
    livestream_url: Optional[str] = None
    created_at: int
    updated_at: int

    class Config:
        from_attributes = True


class PersonnelOut(BaseModel):
    id: int
    launch_id: int
    name: str
    role: str
    bio: Optional[str] = None
    image_url: Optional[str] = None
    is_astronaut: bool

    class Config:
        from_attributes = True


class EventOut(BaseModel):
    id: int
    launch_id: int
    timestamp: int
    title: str
    description: str
    event_type: EventType
    is_live: bool

    class Config:
        from_attributes = True


class CommentOut(BaseModel):
    id: int
    launch_id: int
    user_id: int
    content: str
    created_at: int
    user_name: str

    class Config:
        from_attributes = True


# ── Requests ──

class CommentCreate(BaseModel):
    content: str


class EventCreate(BaseModel):
    title: str
    description: str
    event_type: EventType


class StatusUpdate(BaseModel):
    status: LaunchStatus


class CreatedResponse(BaseModel):
    id: int


class SeedResponse(BaseModel):
    seeded: bool
    launches_created: int = Field(0, ge=0)
