"""Dashboard view-model backing the admin page.

Holds the seeded dashboard state, the loading flag and the active view mode,
and derives everything the template needs for one render.
"""

import asyncio
from contextlib import suppress

from loguru import logger

from eventhub.database import sample_data
from eventhub.exceptions import ValidationError
from eventhub.models.dashboard import DashboardSnapshot, ViewModeOption
from eventhub.models.enums import ViewMode
from eventhub.services import dashboard as dashboard_service
from eventhub.utils.formatting import format_minor_units

VIEW_MODE_LABELS = {
    ViewMode.OVERVIEW: "Overview",
    ViewMode.EVENTS: "Events",
    ViewMode.MEMBERS: "Members",
    ViewMode.REVENUE: "Revenue",
}


class DashboardViewModel:
    """
    State container for the admin dashboard.

    A new view-model starts in the loading phase on the overview section.
    `activate()` seeds the state and starts a single-shot timer that ends the
    loading phase after `loading_delay` seconds; `teardown()` cancels that
    timer, leaving the state untouched.
    """

    def __init__(self, loading_delay: float = 1.0):
        self.loading_delay = loading_delay
        self.loading = True
        self.view_mode = ViewMode.OVERVIEW
        self._activated = False
        self._loading_task: asyncio.Task | None = None
        self._seed()

    def _seed(self) -> None:
        self.stats = sample_data.sample_stats()
        self.trends = sample_data.sample_trends()
        self.membership = sample_data.sample_membership()
        self.recent_members = sample_data.sample_members()
        self.alerts = sample_data.sample_alerts()
        self.quick_links = sample_data.sample_quick_links()
        self.events = sample_data.sample_events()
        self.revenue_summary = sample_data.sample_revenue_summary()

    def activate(self) -> None:
        """
        Seed the state and schedule the end of the loading phase.

        Must be called from a running event loop. Only the first call has an
        effect.
        """
        if self._activated:
            return
        self._activated = True
        self._seed()
        self.loading = True
        self._loading_task = asyncio.get_running_loop().create_task(
            self._finish_loading()
        )
        logger.info(f"Dashboard activated, loading for {self.loading_delay}s.")

    async def _finish_loading(self) -> None:
        await asyncio.sleep(self.loading_delay)
        self.loading = False
        logger.debug("Dashboard data ready.")

    async def wait_loaded(self) -> None:
        """Wait for the pending loading timer, if any, to fire."""
        if self._loading_task is not None:
            await self._loading_task

    async def teardown(self) -> None:
        """
        Discard the pending loading timer.

        Safe to call before activation, after the timer fired, or twice.
        """
        task, self._loading_task = self._loading_task, None
        if task is None or task.done():
            return
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task
        logger.debug("Dashboard torn down before loading finished.")

    def set_view_mode(self, mode: ViewMode | str) -> ViewMode:
        """
        Replace the active section.

        Parameters:
            mode: A ViewMode or its string value.

        Returns:
            ViewMode: The new active mode.

        Raises:
            ValidationError: If `mode` is not one of the four view modes.
        """
        try:
            self.view_mode = ViewMode(mode)
        except ValueError as e:
            raise ValidationError(f"Unknown view mode '{mode}'", field="view") from e
        return self.view_mode

    def visible_sections(self) -> list[ViewMode]:
        """Sections to render: none while loading, otherwise only the active one."""
        if self.loading:
            return []
        return [self.view_mode]

    def mode_options(self) -> list[ViewModeOption]:
        return [
            ViewModeOption(value=mode, label=label, selected=mode == self.view_mode)
            for mode, label in VIEW_MODE_LABELS.items()
        ]

    def formatted_revenue(self) -> dict[str, str]:
        return {
            "revenue_this_month": format_minor_units(self.stats.revenue_this_month),
            "average_transaction": format_minor_units(
                self.revenue_summary.average_transaction
            ),
            "total_ytd": format_minor_units(self.revenue_summary.total_ytd),
        }

    def snapshot(self) -> DashboardSnapshot:
        """Copy of the current state plus every derived chart structure."""
        return DashboardSnapshot(
            loading=self.loading,
            view_mode=self.view_mode,
            visible_sections=self.visible_sections(),
            mode_options=self.mode_options(),
            stats=self.stats.model_copy(),
            trends=self.trends.model_copy(deep=True),
            membership=[m.model_copy() for m in self.membership],
            recent_members=[m.model_copy() for m in self.recent_members],
            alerts=[a.model_copy() for a in self.alerts],
            quick_links=[q.model_copy() for q in self.quick_links],
            events=[e.model_copy() for e in self.events],
            revenue_summary=self.revenue_summary.model_copy(),
            formatted_revenue=self.formatted_revenue(),
            registration_chart=dashboard_service.derive_registration_series(
                self.trends
            ),
            revenue_chart=dashboard_service.derive_revenue_series(self.trends),
            revenue_chart_options=dashboard_service.revenue_chart_options(self.trends),
            membership_chart=dashboard_service.derive_membership_series(
                self.membership
            ),
            chart_options=dashboard_service.chart_options(),
        )
