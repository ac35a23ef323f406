# surplus_sales/repositories/activity_logs.py

from datetime import datetime, timezone

from surplus_sales.core.filters import build_filter_query, contains, gte, lte
from surplus_sales.models.activity_logs import ActivityLog
from surplus_sales.repositories.base import BaseRepository

LOG_FILTERS = {
    "user": contains("user_id"),
    "action": contains("action_type"),
    "status": contains("status"),
    "start_date": gte("timestamp"),
    "end_date": lte("timestamp"),
}


def _naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.replace(tzinfo=None)


def _as_bound_timestamp(value: datetime | None):
    # Matches the stored "YYYY-MM-DD HH:MM:SS" form
    if value is None:
        return None
    return _naive_utc(value).isoformat(sep=" ")


class ActivityLogRepository(BaseRepository):
    model = ActivityLog
    label = "Activity log"

    def create(self, data: dict):
        entry = ActivityLog(
            user_id=data["user_id"],
            action_type=data["action_type"],
            details=data.get("details"),
            status=data["status"],
            is_system_action=bool(data.get("is_system_action")),
        )
        if data.get("timestamp") is not None:
            entry.timestamp = _naive_utc(data["timestamp"])

        return self._save(entry, "create activity log")

    def paginate(self, page: int, limit: int, filters: dict | None = None):
        filters = dict(filters or {})
        for bound in ("start_date", "end_date"):
            if bound in filters:
                filters[bound] = _as_bound_timestamp(filters[bound])

        filter_query = build_filter_query(filters, LOG_FILTERS)
        query = filter_query.apply(self.db.query(ActivityLog))

        total = query.count()
        logs = (
            query
            .order_by(ActivityLog.timestamp.desc())
            .limit(limit)
            .offset((page - 1) * limit)
            .all()
        )

        return logs, total
