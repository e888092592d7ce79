from pydantic import BaseModel, Field
from datetime import datetime
from typing import Any

class ReplyCreate(BaseModel):
    """Reply request"""
    text: Any = Field(default=None, description="Reply text")

class ReplyCreateResponse(BaseModel):
    """Created reply"""
    id: int = Field(..., description="Reply ID")
    post_id: int = Field(..., description="Post ID")
    text: str = Field(..., description="Reply text")

class ReplyResponse(ReplyCreateResponse):
    """Stored reply"""
    timestamp: datetime = Field(..., description="Creation time")

    class Config:
        from_attributes = True
