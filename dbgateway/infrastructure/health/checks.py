"""Health check functions for the table gateway.

Tests connectivity to Supabase through the execute_sql stored procedure.
"""

import asyncio
from typing import Any, Dict

from dbgateway.config import config
from dbgateway.infrastructure.database import SupabaseClient
from dbgateway.infrastructure.database.repositories.table import EXECUTE_SQL_FUNCTION


async def test_supabase_connection(timeout: float = 2.0) -> Dict[str, Any]:
    """Test Supabase connectivity with a minimal statement.

    Returns:
        Dict with status ("healthy", "unconfigured", "timeout", "unavailable")
        and optional error message
    """
    try:
        if not config.is_configured():
            return {"status": "unconfigured", "error": "Supabase credentials not set"}

        provider = await SupabaseClient.get_instance()
        probe = provider.get_client().rpc(
            EXECUTE_SQL_FUNCTION, {"query": "SELECT 1", "params": []}
        )

        await asyncio.wait_for(probe.execute(), timeout=timeout)

        return {"status": "healthy", "database": "connected"}

    except asyncio.TimeoutError:
        return {"status": "timeout", "error": f"Request timed out after {timeout:g}s"}

    except Exception as e:
        return {"status": "unavailable", "error": str(e)[:100]}
