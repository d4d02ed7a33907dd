"""Dashboard entities shown on the admin page.

Monetary fields are stored in minor units (paise) and only converted to
major units when formatted for display.
"""

from pydantic import computed_field
from sqlmodel import SQLModel, Field

from eventhub.models.enums import AlertType, ViewMode

MONTHS_PER_YEAR = 12


class Stats(SQLModel):
    total_events: int = Field(ge=0)
    published_events: int = Field(ge=0)
    total_registrations: int = Field(ge=0)
    active_clubs: int = Field(ge=0)
    revenue_this_month: int = Field(ge=0)
    pending_tasks: int = Field(ge=0)
    new_members: int = Field(ge=0)


class TrendsData(SQLModel):
    # Index i is month i of the calendar year (0 = Jan)
    registrations: list[int] = Field(
        min_length=MONTHS_PER_YEAR, max_length=MONTHS_PER_YEAR
    )
    revenue: list[int] = Field(min_length=MONTHS_PER_YEAR, max_length=MONTHS_PER_YEAR)


class MembershipSlice(SQLModel):
    category: str
    count: int = Field(ge=0)
    color: str


class Member(SQLModel):
    id: int
    name: str
    email: str
    plan: str
    join_date: str


class Alert(SQLModel):
    id: int
    type: AlertType
    message: str
    date: str


class QuickLink(SQLModel):
    title: str
    path: str
    icon: str


class DashboardEvent(SQLModel):
    id: int
    title: str
    date: str
    attendees: int = Field(ge=0)
    status: str

    @computed_field
    @property
    def status_label(self) -> str:
        return self.status[:1].upper() + self.status[1:]

    @computed_field
    @property
    def is_upcoming(self) -> bool:
        return self.status == "upcoming"


class RevenueSummary(SQLModel):
    average_transaction: int = Field(ge=0)
    total_ytd: int = Field(ge=0)


class ViewModeOption(SQLModel):
    value: ViewMode
    label: str
    selected: bool = False


class ViewModeUpdate(SQLModel):
    mode: ViewMode


class DashboardSnapshot(SQLModel):
    """Read-only state of the dashboard for one render cycle."""

    loading: bool
    view_mode: ViewMode
    visible_sections: list[ViewMode]
    mode_options: list[ViewModeOption]
    stats: Stats
    trends: TrendsData
    membership: list[MembershipSlice]
    recent_members: list[Member]
    alerts: list[Alert]
    quick_links: list[QuickLink]
    events: list[DashboardEvent]
    revenue_summary: RevenueSummary
    formatted_revenue: dict[str, str]
    registration_chart: dict
    revenue_chart: dict
    revenue_chart_options: dict
    membership_chart: dict
    chart_options: dict
