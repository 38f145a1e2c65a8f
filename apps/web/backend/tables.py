"""Table API functions."""

from aperture_schemas import Table

from apps.web.backend.client import BackendClient, BackendSession


async def get_all_tables(client: BackendClient, session: BackendSession) -> list[Table]:
    """Get all tables (admin only)."""
    return await client.request(
        "GET",
        client.endpoints.table_all,
        "fetch tables",
        list[Table],
        session=session,
    )
