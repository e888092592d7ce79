from typing import Any, Dict
from pydantic import BaseModel, Field

class ReactionCreate(BaseModel):
    """React request"""
    type: Any = Field(default=None, description="Reaction type")

class ReactionsResponse(BaseModel):
    """Reaction type -> count for the post"""
    reactions: Dict[str, int] = Field(..., description="Reaction breakdown")
