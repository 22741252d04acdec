"""Main entry point for the table gateway.

Usage:
    Development: uvicorn dbgateway.main:app --reload --port 3000
    Production: uvicorn dbgateway.main:app --host 0.0.0.0 --port 3000 --workers 4
"""

from dbgateway.api import create_app
from dbgateway.config import config

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "dbgateway.main:app",
        host="0.0.0.0",
        port=config.port(),
        reload=config.environment() == "development",
        log_level=config.log_level().lower(),
    )
