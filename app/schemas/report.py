from typing import Any
from pydantic import BaseModel, Field

class ReportCreate(BaseModel):
    """Report request"""
    reason: Any = Field(default=None, description="Report reason")

class ReportResponse(BaseModel):
    """Created report"""
    id: int = Field(..., description="Report ID")
    post_id: int = Field(..., description="Post ID")
    reason: str = Field(..., description="Report reason")
