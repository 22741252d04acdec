"""HTTP surface for the table gateway."""

from dbgateway.api.app import create_app

__all__ = ["create_app"]
