"""Member profile API functions."""

from aperture_schemas import UpdateProfileRequest, UserProfile

from apps.web.backend.client import BackendClient, BackendSession


async def get_my_profile(client: BackendClient, session: BackendSession) -> UserProfile:
    """Get the signed-in member's profile."""
    return await client.request(
        "GET",
        client.endpoints.profile_me,
        "fetch profile",
        UserProfile,
        session=session,
    )


async def update_my_profile(
    client: BackendClient,
    session: BackendSession,
    update: UpdateProfileRequest,
) -> UserProfile:
    """Update the signed-in member's profile."""
    return await client.request(
        "PUT",
        client.endpoints.profile_me,
        "update profile",
        UserProfile,
        session=session,
        payload=update,
    )


async def get_all_profiles(
    client: BackendClient, session: BackendSession
) -> list[UserProfile]:
    """Get every member profile (admin)."""
    return await client.request(
        "GET",
        client.endpoints.profile_admin_list,
        "fetch profiles",
        list[UserProfile],
        session=session,
    )


async def get_profile_by_id(
    client: BackendClient, session: BackendSession, user_id: str
) -> UserProfile:
    """
    Get one member's profile by their user id (admin).

    Raises:
        SessionExpiredError: If the session has expired.
        RequestFailedError: If the profile does not exist or the call fails.
    """
    return await client.request(
        "GET",
        client.endpoints.profile_by_id(user_id),
        "fetch profile",
        UserProfile,
        session=session,
    )
