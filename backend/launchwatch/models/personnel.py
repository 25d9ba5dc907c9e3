from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from launchwatch.db.base_class import Base


class Personnel(Base):
    id = Column(Integer, primary_key=True, index=True)
    launch_id = Column(Integer, ForeignKey("launch.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    role = Column(String, nullable=False)
    bio = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    is_astronaut = Column(Boolean, nullable=False, default=False)

    launch = relationship("Launch", back_populates="personnel")
