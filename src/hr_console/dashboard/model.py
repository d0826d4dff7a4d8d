from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from ..core.enums import TimeRange

Number = Union[int, float]


@dataclass(frozen=True)
class ProjectStat:
    """Per-project submission counts as sent by the API."""

    project_id: Any
    project_name: str
    total_assigned: int
    filled: int
    not_filled: int


@dataclass(frozen=True)
class ProjectProgress:
    stat: ProjectStat
    progress: int


@dataclass(frozen=True)
class StatusBuckets:
    """Timesheet status totals; aggregated by the backend, only relayed here."""

    submitted: int = 0
    pending: int = 0
    approved: int = 0
    rejected: int = 0
    draft: int = 0


@dataclass(frozen=True)
class DashboardTotals:
    time_range: TimeRange
    total_expected: int
    total_actual: int
    completion_rate: int
    completion_tone: str
    buckets: StatusBuckets
    bucket_shares: dict[str, int]
    projects: tuple[ProjectProgress, ...] = ()
    total_employees: int = 0
    total_projects: int = 0
    total_project_managers: int = 0
    not_submitted: int = 0
    total_hours_logged: Optional[Number] = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "range": self.time_range.value,
            "totalExpected": self.total_expected,
            "totalActual": self.total_actual,
            "completionRate": self.completion_rate,
            "completionTone": self.completion_tone,
            "perBucketCounts": {
                "submitted": self.buckets.submitted,
                "pending": self.buckets.pending,
                "approved": self.buckets.approved,
                "rejected": self.buckets.rejected,
                "draft": self.buckets.draft,
            },
            "bucketShares": dict(self.bucket_shares),
            "projects": [
                {
                    "projectId": p.stat.project_id,
                    "projectName": p.stat.project_name,
                    "totalAssigned": p.stat.total_assigned,
                    "filled": p.stat.filled,
                    "notFilled": p.stat.not_filled,
                    "progress": p.progress,
                }
                for p in self.projects
            ],
            "totalEmployees": self.total_employees,
            "totalProjects": self.total_projects,
            "totalProjectManagers": self.total_project_managers,
            "notSubmitted": self.not_submitted,
            "totalHoursLogged": self.total_hours_logged,
        }
