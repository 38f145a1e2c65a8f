"""Member profile schemas."""

from datetime import datetime

from aperture_schemas.base import ApiModel


class UserProfile(ApiModel):
    """A member's profile."""

    id: int
    user_id: str
    full_name: str
    phone: str = ""
    email: str
    address: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UpdateProfileRequest(ApiModel):
    """Partial profile update; omitted fields are left unchanged."""

    full_name: str | None = None
    phone: str | None = None
    address: str | None = None
