from enum import Enum


class ViewMode(str, Enum):
    OVERVIEW = "overview"
    EVENTS = "events"
    MEMBERS = "members"
    REVENUE = "revenue"


class AlertType(str, Enum):
    WARNING = "warning"
    INFO = "info"
    ERROR = "error"
    SUCCESS = "success"
