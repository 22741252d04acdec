"""Health check endpoint handler for the table gateway.

Provides /health payload with dependency testing.
"""

from datetime import datetime
from typing import Any, Dict

from dbgateway.infrastructure.health.checks import test_supabase_connection


async def get_health_status(service_name: str = "supabase-table-gateway") -> Dict[str, Any]:
    """Get comprehensive health status.

    Args:
        service_name: Service name for response

    Returns:
        Dict with overall status and dependency health
    """
    supabase_health = await test_supabase_connection()

    overall_status = "healthy" if supabase_health.get("status") == "healthy" else "degraded"

    return {
        "status": overall_status,
        "service": service_name,
        "version": "1.0.0",
        "dependencies": {"supabase": supabase_health},
        "timestamp": datetime.now().isoformat() + "Z",
    }
