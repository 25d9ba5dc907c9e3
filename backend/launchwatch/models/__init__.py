# Import all models so SQLAlchemy can resolve relationships
from launchwatch.models.launch import Launch as Launch, LaunchStatus as LaunchStatus
from launchwatch.models.personnel import Personnel as Personnel
from launchwatch.models.event import LaunchEvent as LaunchEvent, EventType as EventType
from launchwatch.models.comment import Comment as Comment
from launchwatch.models.user import User as User
