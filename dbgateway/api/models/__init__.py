"""API models for the table gateway."""

from dbgateway.api.models.requests import CreateTableRequest
from dbgateway.api.models.responses import success

__all__ = ["CreateTableRequest", "success"]
