# surplus_sales/routers/activity_logs.py

import math
from datetime import date, datetime, time

from fastapi import APIRouter, Depends, Query, status

from surplus_sales.core.auth import get_current_user
from surplus_sales.core.deps import get_activity_log_repository
from surplus_sales.core.exceptions import ValidationError
from surplus_sales.repositories.activity_logs import ActivityLogRepository
from surplus_sales.schemas.activity_log import (
    ActivityLogCreate,
    ActivityLogResponse,
    ActivityLogPage,
)

router = APIRouter(
    prefix="/activity-logs",
    tags=["Activity Logs"],
    dependencies=[Depends(get_current_user)],
)

DEFAULT_LIMIT = 10


def _page_bounds(page: int, limit: int):
    # Out-of-range paging falls back to the defaults
    if page < 1:
        page = 1
    if limit < 1:
        limit = DEFAULT_LIMIT
    return page, limit


def parse_date_bound(name: str, value: str | None, end_of_day: bool = False):
    """Parse an ISO timestamp or a plain YYYY-MM-DD date.

    A plain date used as an upper bound covers the whole day.
    """
    if value is None or not value.strip():
        return None

    value = value.strip()
    try:
        if len(value) == 10:
            day = date.fromisoformat(value)
            return datetime.combine(day, time.max if end_of_day else time.min)
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError(
            f"Invalid {name} format: {value}. Use ISO format or YYYY-MM-DD."
        )


def _page_response(logs, total: int, page: int, limit: int):
    return {
        "data": logs,
        "total": total,
        "page": page,
        "last_page": math.ceil(total / limit),
    }


@router.get("", response_model=ActivityLogPage)
def list_activity_logs(
    page: int = Query(1),
    limit: int = Query(DEFAULT_LIMIT),
    repo: ActivityLogRepository = Depends(get_activity_log_repository),
):
    page, limit = _page_bounds(page, limit)
    logs, total = repo.paginate(page, limit)
    return _page_response(logs, total, page, limit)


@router.get("/filter", response_model=ActivityLogPage)
def filter_activity_logs(
    page: int = Query(1),
    limit: int = Query(DEFAULT_LIMIT),
    user: str | None = Query(None),
    action: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    repo: ActivityLogRepository = Depends(get_activity_log_repository),
):
    page, limit = _page_bounds(page, limit)

    filters = {
        "user": user,
        "action": action,
        "status": status_filter,
        "start_date": parse_date_bound("startDate", start_date),
        "end_date": parse_date_bound("endDate", end_date, end_of_day=True),
    }

    logs, total = repo.paginate(page, limit, filters)
    return _page_response(logs, total, page, limit)


@router.post(
    "",
    response_model=ActivityLogResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_activity_log(
    log_data: ActivityLogCreate,
    repo: ActivityLogRepository = Depends(get_activity_log_repository),
):
    return repo.create(
        {
            "user_id": log_data.user,
            "action_type": log_data.action,
            "details": log_data.details,
            "status": log_data.status,
            "is_system_action": log_data.is_system_action,
            "timestamp": log_data.timestamp,
        }
    )
