"""Fold per-project submission counts into dashboard totals.

Percentages are rounded half-up and fall back to 0 on a zero denominator.
Negative counters are a precondition violation and are not handled.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from ..common.validators import as_count
from ..core.constants import COMPLETION_FAIR_THRESHOLD, COMPLETION_GOOD_THRESHOLD
from ..core.enums import TimeRange
from ..core.exceptions import ValidationError
from .model import DashboardTotals, ProjectProgress, ProjectStat, StatusBuckets


def percent(numerator: int, denominator: int) -> int:
    """round(numerator / denominator * 100), half-up, 0 when denominator is 0."""
    if denominator <= 0:
        return 0
    return (200 * numerator + denominator) // (2 * denominator)


def completion_rate(stats: Sequence[ProjectStat]) -> int:
    total_expected = sum(s.total_assigned for s in stats)
    total_actual = sum(s.filled for s in stats)
    return percent(total_actual, total_expected)


def project_progress(stat: ProjectStat) -> int:
    return percent(stat.filled, stat.filled + stat.not_filled)


def completion_tone(rate: int) -> str:
    if rate >= COMPLETION_GOOD_THRESHOLD:
        return "good"
    if rate >= COMPLETION_FAIR_THRESHOLD:
        return "fair"
    return "poor"


def parse_time_range(value: Any) -> TimeRange:
    if value is None or value == "":
        return TimeRange.CURRENT
    try:
        return TimeRange(str(value))
    except ValueError:
        allowed = ", ".join(r.value for r in TimeRange)
        raise ValidationError(f"range must be one of: {allowed}") from None


def project_stat_from_payload(raw: Mapping[str, Any]) -> ProjectStat:
    if not isinstance(raw, Mapping):
        raise ValidationError(f"Project stat must be an object, got {type(raw).__name__}")
    return ProjectStat(
        project_id=raw.get("projectId"),
        project_name=str(raw.get("projectName") or ""),
        total_assigned=as_count(raw.get("totalAssigned"), "totalAssigned"),
        filled=as_count(raw.get("filled"), "filled"),
        not_filled=as_count(raw.get("notFilled"), "notFilled"),
    )


def buckets_from_payload(raw: Mapping[str, Any]) -> StatusBuckets:
    return StatusBuckets(
        submitted=as_count(raw.get("filledTimesheets"), "filledTimesheets"),
        pending=as_count(raw.get("pendingApproval"), "pendingApproval"),
        approved=as_count(raw.get("approvedTimesheets"), "approvedTimesheets"),
        rejected=as_count(raw.get("rejectedTimesheets"), "rejectedTimesheets"),
        draft=as_count(raw.get("draftTimesheets"), "draftTimesheets"),
    )


def aggregate(
    stats: Iterable[ProjectStat],
    *,
    buckets: StatusBuckets = StatusBuckets(),
    time_range: TimeRange = TimeRange.CURRENT,
    scalars: Mapping[str, Any] | None = None,
) -> DashboardTotals:
    stats = tuple(stats)
    scalars = scalars or {}
    rate = completion_rate(stats)

    return DashboardTotals(
        time_range=time_range,
        total_expected=sum(s.total_assigned for s in stats),
        total_actual=sum(s.filled for s in stats),
        completion_rate=rate,
        completion_tone=completion_tone(rate),
        buckets=buckets,
        bucket_shares={
            "approved": percent(buckets.approved, buckets.submitted),
            "pending": percent(buckets.pending, buckets.submitted),
            "rejected": percent(buckets.rejected, buckets.submitted),
        },
        projects=tuple(ProjectProgress(stat=s, progress=project_progress(s)) for s in stats),
        total_employees=as_count(scalars.get("totalEmployees"), "totalEmployees"),
        total_projects=as_count(scalars.get("totalProjects"), "totalProjects"),
        total_project_managers=as_count(scalars.get("totalProjectManagers"), "totalProjectManagers"),
        not_submitted=as_count(scalars.get("notSubmitted"), "notSubmitted"),
        total_hours_logged=scalars.get("totalHoursLogged") or 0,
    )


def aggregate_payload(raw: Mapping[str, Any] | None, *, time_range: TimeRange = TimeRange.CURRENT) -> DashboardTotals:
    """Aggregate the `{projectStats: [...], ...scalarCounts}` API payload."""
    raw = raw or {}
    if not isinstance(raw, Mapping):
        raise ValidationError("Dashboard payload must be an object")
    project_stats = raw.get("projectStats") or []
    if not isinstance(project_stats, list):
        raise ValidationError("projectStats must be a list")
    return aggregate(
        [project_stat_from_payload(p) for p in project_stats],
        buckets=buckets_from_payload(raw),
        time_range=time_range,
        scalars=raw,
    )
