"""Static seed data for the admin dashboard and the event store.

Every call returns fresh model instances so that a view-model mutating its own
copy never leaks into another one. Monetary values are in paise.
"""

from eventhub.models.dashboard import (
    Alert,
    DashboardEvent,
    Member,
    MembershipSlice,
    QuickLink,
    RevenueSummary,
    Stats,
    TrendsData,
)
from eventhub.models.enums import AlertType
from eventhub.models.event import EventRecord


def sample_stats() -> Stats:
    return Stats(
        total_events=24,
        published_events=18,
        total_registrations=342,
        active_clubs=8,
        revenue_this_month=1245000,
        pending_tasks=5,
        new_members=28,
    )


def sample_trends() -> TrendsData:
    return TrendsData(
        registrations=[32, 45, 67, 89, 72, 58, 65, 87, 91, 105, 120, 132],
        revenue=[
            120000,
            180000,
            220000,
            350000,
            280000,
            190000,
            240000,
            320000,
            410000,
            380000,
            420000,
            460000,
        ],
    )


def sample_membership() -> list[MembershipSlice]:
    return [
        MembershipSlice(category="Standard", count=245, color="#4F46E5"),
        MembershipSlice(category="Premium", count=125, color="#10B981"),
        MembershipSlice(category="VIP", count=78, color="#F59E0B"),
        MembershipSlice(category="Trial", count=42, color="#6B7280"),
    ]


def sample_members() -> list[Member]:
    rows = [
        (1, "Piyush Sharma", "piyush@example.com", "Premium", "08/03/2025"),
        (2, "Aditi Mehta", "aditi@example.com", "Standard", "07/03/2025"),
        (3, "Ravi Kumar", "ravi@example.com", "VIP", "06/03/2025"),
        (4, "Ananya Patel", "ananya@example.com", "Standard", "05/03/2025"),
        (5, "Sohail Khan", "sohail@example.com", "VIP", "04/03/2025"),
    ]
    return [
        Member(id=id_, name=name, email=email, plan=plan, join_date=joined)
        for id_, name, email, plan, joined in rows
    ]


def sample_alerts() -> list[Alert]:
    return [
        Alert(
            id=1,
            type=AlertType.WARNING,
            message='Event capacity for "Garba Night" is at 85%',
            date="10/03/2025",
        ),
        Alert(
            id=2,
            type=AlertType.INFO,
            message='3 new membership applications need review for "MakerCarnival"',
            date="09/03/2025",
        ),
        Alert(
            id=3,
            type=AlertType.ERROR,
            message="Payment processing error for event ticket #28394",
            date="08/03/2025",
        ),
        Alert(
            id=4,
            type=AlertType.SUCCESS,
            message='Monthly revenue target achieved during "Diwali Festival" event',
            date="07/03/2025",
        ),
    ]


def sample_quick_links() -> list[QuickLink]:
    return [
        QuickLink(title="Create New Event", path="/admin/events/create", icon="calendar"),
        QuickLink(title="Add New Member", path="/admin/members/add", icon="user"),
        QuickLink(title="Send Email Campaign", path="/admin/emails/new", icon="mail"),
        QuickLink(
            title="View Recent Transactions",
            path="/admin/finance/transactions",
            icon="credit-card",
        ),
    ]


def sample_events() -> list[DashboardEvent]:
    return [
        DashboardEvent(
            id=1,
            title="Annual Charity Gala",
            date="2025-04-15",
            attendees=120,
            status="upcoming",
        ),
        DashboardEvent(
            id=2,
            title="Tech Conference 2025",
            date="2025-05-22",
            attendees=250,
            status="upcoming",
        ),
        DashboardEvent(
            id=3,
            title="Cultural Festival",
            date="2025-03-01",
            attendees=180,
            status="completed",
        ),
    ]


def sample_revenue_summary() -> RevenueSummary:
    return RevenueSummary(average_transaction=364000, total_ytd=3240000)


def seed_event_records() -> list[EventRecord]:
    return [EventRecord(id="1"), EventRecord(id="2")]
