"""Report API routes.

Endpoint:
- GET /api/report - Freshly collected report as JSON
"""

from typing import Dict, List, Optional, Union

from fastapi import APIRouter, Query, Request
from pydantic import BaseModel

from server_info import i18n
from server_info.context import RequestContext

router = APIRouter()


class FactOut(BaseModel):
    """A single fact of a report group."""
    key: str
    label: str
    value: Optional[Union[str, Dict[str, str]]]
    sensitive: bool


class GroupOut(BaseModel):
    """A labeled group of facts."""
    key: str
    label: str
    fields: List[FactOut]


class ReportOut(BaseModel):
    """Full report."""
    groups: List[GroupOut]


@router.get("/report", response_model=ReportOut)
def get_report(
    request: Request,
    include_sensitive: bool = Query(False, description="Include credential-like values"),
) -> ReportOut:
    """Collect and return the report. Sensitive values are redacted by default."""
    server_info = request.app.state.server_info
    context = RequestContext.from_scope(
        request.scope,
        server_software=request.app.state.server_software,
        server_admin=server_info.server_admin,
    )
    report = server_info.collect(context)

    redacted = i18n.gettext("[redacted]")
    groups = []
    for group in report.to_dict(redact_sensitive=not include_sensitive, redacted=redacted):
        groups.append(GroupOut(
            key=group["key"],
            label=group["label"],
            fields=[FactOut(key=key, **fact) for key, fact in group["fields"].items()],
        ))
    return ReportOut(groups=groups)
