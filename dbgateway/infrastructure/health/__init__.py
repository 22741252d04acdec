"""Health monitoring module for the table gateway.

Provides health check endpoints and dependency testing.
"""

from dbgateway.infrastructure.health.checks import test_supabase_connection
from dbgateway.infrastructure.health.endpoints import get_health_status

__all__ = [
    "test_supabase_connection",
    "get_health_status",
]
