import asyncio
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict

from src.dijkstra.exceptions import ValidationError
from src.flight_router.application import FindCheapestFlight
from src.flight_router.config import Config, configure_logging
from src.flight_router.schemas.route import NoRoute, RouteResult, SearchResult

configure_logging()

router = FindCheapestFlight()

app = FastAPI(title="Cheapest Flight API")

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Pydantic Schemas (The JSON Contract) ---
# We define these so the API includes the @property fields in the response.


class AirportSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    index: int
    code: str
    name: str
    label: str  # This captures the @property


class RouteSegmentSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)  # Allows reading from dataclasses

    segment_index: int
    departure_airport: str
    arrival_airport: str
    price: int


class RouteResultSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    cost: int
    path: List[int]
    segments: List[RouteSegmentSchema]
    route_cities: List[str]  # Captures @property
    num_segments: int  # Captures @property


class DestinationSchema(BaseModel):
    destination: str
    reachable: bool
    route: Optional[RouteResultSchema] = None


# --- API Endpoints ---


def _run_search(origin: str, destination: str) -> SearchResult:
    try:
        return router.search(origin, destination)
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@app.get("/airports", response_model=List[AirportSchema])
async def list_airports():
    return [AirportSchema.model_validate(a) for a in router.airports]


@app.get("/route", response_model=RouteResultSchema)
async def find_route(origin: str, destination: str):
    # Dijkstra is synchronous; the graph is read-only so queries can run in parallel
    loop = asyncio.get_running_loop()
    result = await loop.run_in_executor(None, _run_search, origin, destination)

    if isinstance(result, NoRoute):
        raise HTTPException(status_code=404, detail=result.message)

    return RouteResultSchema.model_validate(result)


@app.get("/routes/{origin}", response_model=List[DestinationSchema])
async def find_all_routes(origin: str):
    """
    Cheapest route from origin to every other airport.

    Unreachable destinations are listed with reachable=False and no route.
    """
    loop = asyncio.get_running_loop()
    try:
        results: Dict[str, SearchResult] = await loop.run_in_executor(
            None, router.search_all, origin
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return [
        DestinationSchema(
            destination=code,
            reachable=result.reachable,
            route=(
                RouteResultSchema.model_validate(result)
                if isinstance(result, RouteResult)
                else None
            ),
        )
        for code, result in results.items()
    ]
