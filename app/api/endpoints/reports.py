from typing import Annotated
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.validation import validate_report_reason
from app.crud import reports as crud_reports
from app.db.database import get_session
from app.schemas.report import ReportCreate, ReportResponse

router = APIRouter()

@router.post("/report", response_model=ReportResponse, summary="Report a post")
def create_report(
    post_id: int,
    report_in: ReportCreate,
    session: Annotated[Session, Depends(get_session)]
):
    """Report a post for one of the fixed reasons"""
    reason = validate_report_reason(report_in.reason)
    return crud_reports.add_report(session, post_id, reason)
