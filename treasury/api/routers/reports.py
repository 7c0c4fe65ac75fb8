import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from treasury.api.deps.request_identity import get_request_identity
from treasury.db.session import get_db
from treasury.schemas.reports import DashboardSummaryOut, ReportFilter
from treasury.schemas.request_identity import RequestIdentity
from treasury.services.report_service import export_response, load_report_records

router = APIRouter(prefix="/reports", tags=["reports"])
logger = logging.getLogger(__name__)


@router.get("/dashboard", response_model=DashboardSummaryOut)
def dashboard_api(
    filters: Annotated[ReportFilter, Query()],
    db: Session = Depends(get_db),
    _: RequestIdentity = Depends(get_request_identity),
):
    return load_report_records(db, filters).summary()


@router.get("/export")
def export_api(
    filters: Annotated[ReportFilter, Query()],
    db: Session = Depends(get_db),
    identity: RequestIdentity = Depends(get_request_identity),
):
    """XLSX workbook: a summary sheet plus one sheet per record collection."""
    logger.info("report_export user=%s period=%s", identity.username, filters.period or "-")
    return export_response(load_report_records(db, filters))
