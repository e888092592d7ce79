from sqlalchemy.orm import Session

from app.models.report import Report


def add_report(session: Session, post_id: int, reason: str) -> dict:
    report = Report(post_id=post_id, reason=reason)
    session.add(report)
    session.commit()
    return {"id": report.id, "post_id": post_id, "reason": reason}
