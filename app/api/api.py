from fastapi import APIRouter
from app.api.endpoints import (
    posts,
    reactions,
    replies,
    reports
)

api_router = APIRouter()

api_router.include_router(posts.router, prefix="/posts", tags=["posts"])
api_router.include_router(reactions.router, prefix="/posts/{post_id}", tags=["reactions"])
api_router.include_router(replies.router, prefix="/posts/{post_id}", tags=["replies"])
api_router.include_router(reports.router, prefix="/posts/{post_id}", tags=["reports"])
