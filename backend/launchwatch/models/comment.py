from sqlalchemy import Column, Integer, BigInteger, Text, ForeignKey
from sqlalchemy.orm import relationship
from launchwatch.db.base_class import Base


class Comment(Base):
    id = Column(Integer, primary_key=True, index=True)
    launch_id = Column(Integer, ForeignKey("launch.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    created_at = Column(BigInteger, nullable=False)

    launch = relationship("Launch", back_populates="comments")
    author = relationship("User", back_populates="comments")
