"""
Tests for the flights FastAPI endpoints.

Endpoint coroutines are awaited directly with the module-level router
patched, so no HTTP client is needed.
"""

from unittest.mock import patch

import pytest
from fastapi import HTTPException

from src.fastapi.flights_api import (
    AirportSchema,
    RouteResultSchema,
    find_all_routes,
    find_route,
    list_airports,
)


# =============================================================================
# GET /airports
# =============================================================================


class TestListAirports:
    @pytest.mark.anyio
    async def test_lists_all_airports(self, us_router):
        with patch("src.fastapi.flights_api.router", us_router):
            airports = await list_airports()

        assert len(airports) == 11
        assert airports[0] == AirportSchema(
            index=0, code="SFO", name="San Francisco", label="San Francisco (SFO)"
        )
        assert [a.code for a in airports][-1] == "BOS"


# =============================================================================
# GET /route
# =============================================================================


class TestFindRoute:
    @pytest.mark.anyio
    async def test_cheapest_route(self, us_router):
        with patch("src.fastapi.flights_api.router", us_router):
            response = await find_route("SFO", "IAH")

        assert isinstance(response, RouteResultSchema)
        assert response.cost == 540
        assert response.path == [0, 3, 6]
        assert response.route_cities == ["SFO", "DEN", "IAH"]
        assert response.num_segments == 2
        assert [s.price for s in response.segments] == [240, 300]

    @pytest.mark.anyio
    async def test_lower_case_codes(self, us_router):
        with patch("src.fastapi.flights_api.router", us_router):
            response = await find_route("lax", "sfo")

        assert response.cost == 100

    @pytest.mark.anyio
    async def test_serializes_to_json(self, us_router):
        with patch("src.fastapi.flights_api.router", us_router):
            response = await find_route("SFO", "LAX")

        payload = response.model_dump()
        assert payload["cost"] == 150
        assert payload["segments"][0]["departure_airport"] == "SFO"

    @pytest.mark.anyio
    async def test_no_route_is_404(self, island_router):
        with patch("src.fastapi.flights_api.router", island_router):
            with pytest.raises(HTTPException) as exc_info:
                await find_route("AAA", "CCC")

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "No route exists from AAA to CCC"

    @pytest.mark.anyio
    async def test_unknown_airport_is_400(self, us_router):
        with patch("src.fastapi.flights_api.router", us_router):
            with pytest.raises(HTTPException) as exc_info:
                await find_route("SFO", "XYZ")

        assert exc_info.value.status_code == 400
        assert "XYZ" in exc_info.value.detail

    @pytest.mark.anyio
    async def test_same_airport_is_400(self, us_router):
        with patch("src.fastapi.flights_api.router", us_router):
            with pytest.raises(HTTPException) as exc_info:
                await find_route("SFO", "sfo")

        assert exc_info.value.status_code == 400


# =============================================================================
# GET /routes/{origin}
# =============================================================================


class TestFindAllRoutes:
    @pytest.mark.anyio
    async def test_every_destination_listed(self, us_router):
        with patch("src.fastapi.flights_api.router", us_router):
            destinations = await find_all_routes("SFO")

        assert [d.destination for d in destinations] == [
            "SEA", "LAX", "DEN", "ORD", "DFW", "IAH", "ATL", "MIA", "JFK", "BOS",
        ]
        assert all(d.reachable for d in destinations)
        by_code = {d.destination: d.route.cost for d in destinations}
        assert by_code["BOS"] == 1250
        assert by_code["MIA"] == 990

    @pytest.mark.anyio
    async def test_unreachable_has_no_route(self, island_router):
        with patch("src.fastapi.flights_api.router", island_router):
            destinations = await find_all_routes("AAA")

        assert destinations[0].destination == "BBB"
        assert destinations[0].route.cost == 10
        assert destinations[1].destination == "CCC"
        assert not destinations[1].reachable
        assert destinations[1].route is None

    @pytest.mark.anyio
    async def test_unknown_origin_is_400(self, us_router):
        with patch("src.fastapi.flights_api.router", us_router):
            with pytest.raises(HTTPException) as exc_info:
                await find_all_routes("XYZ")

        assert exc_info.value.status_code == 400
