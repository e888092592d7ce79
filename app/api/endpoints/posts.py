from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db.database import get_session
from app.core.validation import clean_post_text, normalize_mood, normalize_image
from app.crud import posts as crud_posts
from app.schemas.post import (
    PostCreate,
    PostUpdate,
    PostResponse,
    PostCreateResponse,
    PostUpdateResponse,
    LikesResponse,
    RepostsResponse,
    DeleteResponse
)
from typing import List, Optional

router = APIRouter()

@router.get("", response_model=List[PostResponse], summary="List all posts")
def list_posts(
    sort: Optional[str] = None,
    session: Session = Depends(get_session)
):
    """List all posts, newest first, or by engagement with sort=top"""
    return crud_posts.list_posts(session, sort)

@router.post("", response_model=PostCreateResponse, summary="Create a new post")
def create_post(
    post: PostCreate,
    session: Session = Depends(get_session)
):
    """Create a new post"""
    text = clean_post_text(post.text)
    return crud_posts.create_post(
        session,
        text=text,
        mood=normalize_mood(post.mood),
        image=normalize_image(post.image)
    )

@router.put("/{post_id}", response_model=PostUpdateResponse, summary="Edit the text, mood and image of a post")
def update_post(
    post_id: int,
    post_update: PostUpdate,
    session: Session = Depends(get_session)
):
    """Edit a post; likes, reposts and timestamp are kept"""
    text = clean_post_text(post_update.text)
    return crud_posts.update_post(
        session,
        post_id,
        text=text,
        mood=normalize_mood(post_update.mood),
        image=normalize_image(post_update.image)
    )

@router.delete("/{post_id}", response_model=DeleteResponse, summary="Delete a post and all its reactions, replies and reports")
def delete_post(
    post_id: int,
    session: Session = Depends(get_session)
):
    """Delete a post and all its reactions, replies and reports"""
    crud_posts.delete_post(session, post_id)
    return {"ok": True}

@router.post("/{post_id}/like", response_model=LikesResponse, summary="Like a post")
def like_post(
    post_id: int,
    session: Session = Depends(get_session)
):
    """Like a post"""
    return {"likes": crud_posts.increment_likes(session, post_id)}

@router.post("/{post_id}/repost", response_model=RepostsResponse, summary="Repost a post")
def repost_post(
    post_id: int,
    session: Session = Depends(get_session)
):
    """Repost a post"""
    return {"reposts": crud_posts.increment_reposts(session, post_id)}
