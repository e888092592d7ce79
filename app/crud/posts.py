"""Post queries.

Listing is assembled from two statements: one joined query for the posts
with their reaction and reply totals, and one grouped query returning the
type-by-type reaction breakdown for every listed post at once.
"""
from typing import Dict, List, Optional, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.models.post import Post
from app.models.reaction import Reaction
from app.models.reply import Reply
from app.models.report import Report

SORT_TOP = "top"


def get_reactions_for_posts(session: Session, post_ids: Sequence[int]) -> Dict[int, Dict[str, int]]:
    """Map post id -> {reaction type: count} for the given posts, in a single query"""
    if not post_ids:
        return {}
    rows = session.query(
        Reaction.post_id,
        Reaction.type,
        func.count(Reaction.id)
    ).filter(
        Reaction.post_id.in_(post_ids)
    ).group_by(
        Reaction.post_id,
        Reaction.type
    ).all()

    reactions_map: Dict[int, Dict[str, int]] = {}
    for post_id, reaction_type, count in rows:
        reactions_map.setdefault(post_id, {})[reaction_type] = count
    return reactions_map


def list_posts(session: Session, sort: Optional[str] = None) -> List[dict]:
    """List posts with reaction_count, reply_count and the reactions breakdown"""
    reaction_totals = session.query(
        Reaction.post_id.label("post_id"),
        func.count(Reaction.id).label("reaction_count")
    ).group_by(Reaction.post_id).subquery()

    reply_totals = session.query(
        Reply.post_id.label("post_id"),
        func.count(Reply.id).label("reply_count")
    ).group_by(Reply.post_id).subquery()

    reaction_count = func.coalesce(reaction_totals.c.reaction_count, 0)
    reply_count = func.coalesce(reply_totals.c.reply_count, 0)

    query = session.query(
        Post,
        reaction_count.label("reaction_count"),
        reply_count.label("reply_count")
    ).outerjoin(
        reaction_totals, reaction_totals.c.post_id == Post.id
    ).outerjoin(
        reply_totals, reply_totals.c.post_id == Post.id
    )

    if sort == SORT_TOP:
        query = query.order_by((reaction_count + Post.reposts + Post.likes).desc(), Post.id.desc())
    else:
        query = query.order_by(Post.timestamp.desc(), Post.id.desc())

    rows = query.all()
    reactions_map = get_reactions_for_posts(session, [post.id for post, _, _ in rows])

    return [{
        "id": post.id,
        "text": post.text,
        "mood": post.mood,
        "image": post.image,
        "likes": post.likes,
        "reposts": post.reposts,
        "timestamp": post.timestamp,
        "reaction_count": post_reaction_count,
        "reply_count": post_reply_count,
        "reactions": reactions_map.get(post.id, {})
    } for post, post_reaction_count, post_reply_count in rows]


def create_post(session: Session, text: str, mood: str, image: Optional[str]) -> dict:
    """Insert a post; counters start at zero"""
    post = Post(text=text, mood=mood, image=image)
    session.add(post)
    session.commit()
    return {
        "id": post.id,
        "text": post.text,
        "mood": post.mood,
        "image": post.image,
        "likes": 0,
        "reposts": 0,
        "reactions": {},
        "reply_count": 0
    }


def update_post(session: Session, post_id: int, text: str, mood: str, image: Optional[str]) -> dict:
    """Overwrite text, mood and image; counters and timestamp are left alone"""
    updated = session.query(Post).filter(Post.id == post_id).update(
        {Post.text: text, Post.mood: mood, Post.image: image},
        synchronize_session=False
    )
    if updated == 0:
        session.rollback()
        raise NotFoundError()
    session.commit()
    return {"id": post_id, "text": text, "mood": mood, "image": image}


def delete_post(session: Session, post_id: int) -> None:
    """Delete a post together with its reactions, replies and reports.

    The child deletes always run, so orphans left under a missing post id are
    cleaned up even when the post itself is not found.
    """
    session.query(Reaction).filter(Reaction.post_id == post_id).delete(synchronize_session=False)
    session.query(Reply).filter(Reply.post_id == post_id).delete(synchronize_session=False)
    session.query(Report).filter(Report.post_id == post_id).delete(synchronize_session=False)
    deleted = session.query(Post).filter(Post.id == post_id).delete(synchronize_session=False)
    session.commit()
    if deleted == 0:
        raise NotFoundError()


def _increment(session: Session, post_id: int, column) -> int:
    updated = session.query(Post).filter(Post.id == post_id).update(
        {column: column + 1},
        synchronize_session=False
    )
    if updated == 0:
        session.rollback()
        raise NotFoundError()
    value = session.query(column).filter(Post.id == post_id).scalar()
    session.commit()
    return value


def increment_likes(session: Session, post_id: int) -> int:
    return _increment(session, post_id, Post.likes)


def increment_reposts(session: Session, post_id: int) -> int:
    return _increment(session, post_id, Post.reposts)
