"""Dining table schemas."""

from datetime import datetime
from enum import Enum

from aperture_schemas.base import ApiModel


class TableStatus(str, Enum):
    """Current state of a dining table."""

    AVAILABLE = "AVAILABLE"
    OCCUPIED = "OCCUPIED"
    RESERVED = "RESERVED"
    MAINTENANCE = "MAINTENANCE"


class Table(ApiModel):
    """A dining table."""

    id: int
    table_number: str
    capacity: int
    min_capacity: int
    status: TableStatus
    description: str | None = None
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
