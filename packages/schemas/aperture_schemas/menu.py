"""Menu schemas - raw backend menu items and their display forms."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from aperture_schemas.base import ApiModel


class MenuItem(ApiModel):
    """A menu item exactly as the backend returns it."""

    id: str
    name: str
    description: str = ""
    price: Decimal
    image_url: str = ""
    category: str
    calories: int | None = None
    is_spicy: bool | None = None
    is_vegan: bool | None = None
    preparation_time: int | None = None
    # The backend serializes availability as the string "true" / "false"
    is_available: str = "true"
    created_at: datetime | None = None
    updated_at: datetime | None = None


class NormalizedMenuItem(ApiModel):
    """Menu item in display form: lower-cased category, boolean availability."""

    id: str
    name: str
    description: str = ""
    price: Decimal
    image: str = ""
    category: str = Field(min_length=1)
    calories: int | None = None
    is_spicy: bool | None = None
    is_vegan: bool | None = None
    preparation_time: int | None = None
    is_available: bool = True


class CategoryOption(BaseModel):
    """A menu category as offered in sidebars and tabs."""

    id: str
    name: str
