from datetime import datetime, UTC
import enum
from sqlalchemy import Column, Integer, String, DateTime, func

from app.db.database import Base

class ReactionType(str, enum.Enum):
    """Reaction type"""
    LOVE = "love"
    HAHA = "haha"
    SAD = "sad"
    ANGRY = "angry"
    FIRE = "fire"

class Reaction(Base):
    """Reaction model, append-only"""
    __tablename__ = "reactions"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, nullable=False, index=True)  # Not using foreign key, only storing ID
    type = Column(String, nullable=False)
    timestamp = Column(DateTime, nullable=False, default=lambda: datetime.now(UTC), server_default=func.current_timestamp())
