"""Infrastructure modules for the table gateway.

- Database: Supabase client singleton, generic table repository and registry
- Health: Dependency health checks
"""

# Database
from dbgateway.infrastructure.database import (
    BaseRepository,
    RepositoryRegistry,
    SupabaseClient,
    TableRepository,
)

# Health
from dbgateway.infrastructure.health import get_health_status, test_supabase_connection

__all__ = [
    # Database
    "SupabaseClient",
    "BaseRepository",
    "TableRepository",
    "RepositoryRegistry",
    # Health
    "test_supabase_connection",
    "get_health_status",
]
