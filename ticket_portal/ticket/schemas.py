# ticket_portal/ticket/schemas.py
from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TITLE_MIN_LENGTH = 3
DESCRIPTION_MIN_LENGTH = 10


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class Status(str, Enum):
    OPEN = "Open"
    IN_PROGRESS = "In-Progress"
    CLOSED = "Closed"


class TicketCreate(BaseModel):
    title: str = Field(..., min_length=TITLE_MIN_LENGTH)
    description: str = Field(..., min_length=DESCRIPTION_MIN_LENGTH)
    priority: Priority = Priority.MEDIUM
    status: Literal["Open"] = Status.OPEN.value

    model_config = ConfigDict(use_enum_values=True)


class TicketUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=TITLE_MIN_LENGTH)
    description: str | None = Field(default=None, min_length=DESCRIPTION_MIN_LENGTH)
    priority: Priority | None = None
    status: Status | None = None

    model_config = ConfigDict(use_enum_values=True)


class Ticket(BaseModel):
    # id and createdAt are server-assigned and opaque; unparseable timestamps stay raw
    id: int | str | None = None
    title: str
    description: str
    priority: str = Priority.MEDIUM.value
    status: str = Status.OPEN.value
    created_at: datetime | str | None = Field(
        default=None, alias="createdAt", union_mode="left_to_right"
    )

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
