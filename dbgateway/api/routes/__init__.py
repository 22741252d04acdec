"""Routes for the table gateway."""

from dbgateway.api.routes import system, tables

__all__ = ["system", "tables"]
