"""Middleware for the table gateway."""

from dbgateway.api.middleware.error_handler import error_response, register_exception_handlers
from dbgateway.api.middleware.request_id import request_id_middleware

__all__ = ["error_response", "register_exception_handlers", "request_id_middleware"]
