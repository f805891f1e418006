"""
Domain services for the Flight Router.

Services orchestrate the interaction between ports (repositories, algorithms)
and domain logic (constraints validation, result transformation).
"""

from src.flight_router.services.route_finder_service import RouteFinderService

__all__ = ["RouteFinderService"]
