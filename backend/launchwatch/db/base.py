# Import Base class and all models so create_all can detect them
from launchwatch.db.base_class import Base  # noqa
from launchwatch.models.launch import Launch, LaunchStatus  # noqa
from launchwatch.models.personnel import Personnel  # noqa
from launchwatch.models.event import LaunchEvent, EventType  # noqa
from launchwatch.models.comment import Comment  # noqa
from launchwatch.models.user import User  # noqa
