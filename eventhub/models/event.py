from sqlmodel import SQLModel


class EventRecord(SQLModel):
    id: str


class EventDeleted(SQLModel):
    message: str = "Event deleted"
