from typing import Dict

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.reaction import Reaction


def get_reaction_breakdown(session: Session, post_id: int) -> Dict[str, int]:
    """Reaction type -> count for one post"""
    rows = session.query(
        Reaction.type,
        func.count(Reaction.id)
    ).filter(
        Reaction.post_id == post_id
    ).group_by(Reaction.type).all()
    return {reaction_type: count for reaction_type, count in rows}


def add_reaction(session: Session, post_id: int, reaction_type: str) -> Dict[str, int]:
    """Insert a reaction and return the post's breakdown after the insert.

    The post is not required to exist.
    """
    session.add(Reaction(post_id=post_id, type=reaction_type))
    session.commit()
    return get_reaction_breakdown(session, post_id)
