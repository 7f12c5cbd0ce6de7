"""Application service: Daily Report use case (query)."""

from __future__ import annotations

from datetime import date

from qpos.application.access import BACK_OFFICE, ensure_role
from qpos.application.dto import DailyReportDTO, current_formatter, to_daily_report_dto
from qpos.application.order_store import OrderLifecycleStore
from qpos.domain.model.user import Principal
from qpos.domain.repository.settings_repository import SettingsRepository


class DailyReportHandler:

    def __init__(self, store: OrderLifecycleStore, settings_repo: SettingsRepository) -> None:
        self._store = store
        self._settings_repo = settings_repo

    def handle(self, principal: Principal, day: date | None = None) -> DailyReportDTO:
        """Sales summary for *day* (today if omitted)."""
        ensure_role(principal, BACK_OFFICE, "view sales reports")
        stats = self._store.get_daily_stats(day)
        return to_daily_report_dto(stats, current_formatter(self._settings_repo))
