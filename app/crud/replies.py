from typing import List

from sqlalchemy.orm import Session

from app.models.reply import Reply


def list_replies(session: Session, post_id: int) -> List[Reply]:
    """Replies of a post, oldest first"""
    return session.query(Reply).filter(
        Reply.post_id == post_id
    ).order_by(Reply.timestamp.asc(), Reply.id.asc()).all()


def add_reply(session: Session, post_id: int, text: str) -> dict:
    reply = Reply(post_id=post_id, text=text)
    session.add(reply)
    session.commit()
    return {"id": reply.id, "post_id": post_id, "text": text}
