from typing import Annotated
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.validation import validate_reaction_type
from app.crud import reactions as crud_reactions
from app.db.database import get_session
from app.schemas.reaction import ReactionCreate, ReactionsResponse

router = APIRouter()

@router.post("/react", response_model=ReactionsResponse, summary="React to a post")
def create_reaction(
    post_id: int,
    reaction_in: ReactionCreate,
    session: Annotated[Session, Depends(get_session)]
):
    """Add a reaction and return the post's reaction breakdown"""
    reaction_type = validate_reaction_type(reaction_in.type)
    return {"reactions": crud_reactions.add_reaction(session, post_id, reaction_type)}
