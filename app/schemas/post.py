from pydantic import BaseModel, Field
from datetime import datetime
from typing import Any, Dict

class PostBase(BaseModel):
    """Post request body; text and mood are checked by the validation layer"""
    text: Any = Field(default=None, description="Post text, at most 280 characters after trimming")
    mood: Any = Field(default=None, description="Mood, unknown values fall back to none")
    image: Any = Field(default=None, description="Image data URI or URL, stored as-is")

class PostCreate(PostBase):
    """Create post request"""
    pass

class PostUpdate(PostBase):
    """Edit post request"""
    pass

class PostUpdateResponse(BaseModel):
    """Edited post"""
    id: int
    text: str
    mood: str
    image: Any = None

class PostCreateResponse(PostUpdateResponse):
    """Created post"""
    likes: int = 0
    reposts: int = 0
    reactions: Dict[str, int] = Field(default_factory=dict)
    reply_count: int = 0

class PostResponse(PostUpdateResponse):
    """Post in the feed"""
    likes: int
    reposts: int
    timestamp: datetime
    reaction_count: int
    reply_count: int
    reactions: Dict[str, int]

    class Config:
        from_attributes = True

class LikesResponse(BaseModel):
    likes: int

class RepostsResponse(BaseModel):
    reposts: int

class DeleteResponse(BaseModel):
    ok: bool = True
