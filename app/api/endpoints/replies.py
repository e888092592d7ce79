from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db.database import get_session
from app.core.validation import clean_reply_text
from app.crud import replies as crud_replies
from app.schemas.reply import ReplyCreate, ReplyCreateResponse, ReplyResponse
from typing import List

router = APIRouter()

@router.get("/replies", response_model=List[ReplyResponse], summary="List the replies to a post")
def list_replies(
    post_id: int,
    session: Session = Depends(get_session)
):
    """List the replies to a post, oldest first"""
    return crud_replies.list_replies(session, post_id)

@router.post("/reply", response_model=ReplyCreateResponse, summary="Reply to a post")
def create_reply(
    post_id: int,
    reply: ReplyCreate,
    session: Session = Depends(get_session)
):
    """Reply to a post"""
    text = clean_reply_text(reply.text)
    return crud_replies.add_reply(session, post_id, text)
