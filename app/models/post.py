from sqlalchemy import Column, String, Text, DateTime, Integer, func
from app.db.database import Base
from datetime import datetime, UTC
from enum import Enum as PyEnum

class Mood(str, PyEnum):
    """Post mood"""
    NONE = "none"  # default, also used for unknown values
    LOVE = "love"
    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"
    ANXIOUS = "anxious"
    EXCITED = "excited"

class Post(Base):
    """Post model"""
    __tablename__ = "posts"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(Text, nullable=False)
    mood = Column(String, default=Mood.NONE.value, server_default=Mood.NONE.value)
    image = Column(Text, nullable=True)  # data URI or URL, stored as-is
    likes = Column(Integer, nullable=False, default=0, server_default="0")
    reposts = Column(Integer, nullable=False, default=0, server_default="0")
    timestamp = Column(DateTime, nullable=False, default=lambda: datetime.now(UTC), server_default=func.current_timestamp())
