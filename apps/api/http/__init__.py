"""HTTP adapter for the blueprints API."""

from .router import register_routes

__all__ = ["register_routes"]
