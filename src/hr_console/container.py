from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from .api.client import ApiClient
from .changelog.http_changelog_repository import HttpChangeLogRepository
from .changelog.service import ChangeHistoryService
from .core.constants import DEFAULT_TARGET_DAYS
from .dashboard.http_dashboard_repository import HttpDashboardRepository
from .dashboard.service import DashboardService
from .expiry.http_expiry_repository import HttpExpiryRepository
from .expiry.service import ExpiryWatchlistService


@dataclass(frozen=True)
class Container:
    client: ApiClient

    expiry_repo: HttpExpiryRepository
    changelog_repo: HttpChangeLogRepository
    dashboard_repo: HttpDashboardRepository

    expiry_service: ExpiryWatchlistService
    history_service: ChangeHistoryService
    dashboard_service: DashboardService


def build_container(
    *,
    client: ApiClient,
    default_target_days: int = DEFAULT_TARGET_DAYS,
    today_provider: Optional[Callable[[], date]] = None,
) -> Container:
    expiry_repo = HttpExpiryRepository(client)
    changelog_repo = HttpChangeLogRepository(client)
    dashboard_repo = HttpDashboardRepository(client)

    expiry_service = ExpiryWatchlistService(
        expiry_repo,
        default_target_days=default_target_days,
        today_provider=today_provider,
    )
    history_service = ChangeHistoryService(changelog_repo)
    dashboard_service = DashboardService(dashboard_repo)

    return Container(
        client=client,
        expiry_repo=expiry_repo,
        changelog_repo=changelog_repo,
        dashboard_repo=dashboard_repo,
        expiry_service=expiry_service,
        history_service=history_service,
        dashboard_service=dashboard_service,
    )
