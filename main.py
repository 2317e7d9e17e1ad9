import datetime
import logging
from typing import List

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config import Settings, get_settings
from logging_config import setup_logging
from nasa_client import UpstreamHTTPError, UpstreamUnavailable, fetch_feed
from normalize import AsteroidSummary, FeedError, extract_near_earth_objects, parse_nasa_data

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

# Initialize FastAPI app
app = FastAPI(
    title="NASA API",
    description="NASA API documentation",
    version="1.0.0",
    docs_url="/documentation",
)

# ============================================================================
# CONFIGURE CORS
# ============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============================================================================
# PYDANTIC MODELS FOR RESPONSES
# ============================================================================
class AsteroidsResponse(BaseModel):
    asteroids: List[AsteroidSummary]

# ============================================================================
# ERROR HANDLERS
# ============================================================================

@app.exception_handler(FeedError)
async def feed_error_handler(request: Request, exc: FeedError):
    logger.error("Bad data from NASA API: %s", exc)
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(UpstreamHTTPError)
async def upstream_http_error_handler(request: Request, exc: UpstreamHTTPError):
    logger.error("NASA API error (status %s): %s", exc.status_code, exc)
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(UpstreamUnavailable)
async def upstream_unavailable_handler(request: Request, exc: UpstreamUnavailable):
    logger.error("NASA API unavailable: %s", exc)
    return JSONResponse(status_code=503, content={"detail": str(exc)})

# ============================================================================
# NASA API ENDPOINT
# ============================================================================

def parse_date_range(start_date: str, end_date: str):
    try:
        start = datetime.date.fromisoformat(start_date)
        end = datetime.date.fromisoformat(end_date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid date: {e}")

    if end < start:
        raise HTTPException(
            status_code=400,
            detail="end_date must not be before start_date",
        )
    return start, end


@app.get("/api/nasa", response_model=AsteroidsResponse)
def get_asteroids(
    start_date: str = Query(..., pattern=DATE_PATTERN),
    end_date: str = Query(..., pattern=DATE_PATTERN),
    config: Settings = Depends(get_settings),
):
    """
    Fetch asteroids from the NASA NeoWs feed for a date range
    Returns: { "asteroids": [ {name, average_size, closeness_to_earth_km,
    relative_velocity_kmh}, ... ] }
    """
    parse_date_range(start_date, end_date)

    feed = fetch_feed(start_date, end_date, config)
    asteroids = parse_nasa_data(extract_near_earth_objects(feed))
    logger.info("Returning %d asteroids for %s to %s", len(asteroids), start_date, end_date)

    return {"asteroids": asteroids}

# ============================================================================
# HEALTH CHECK
# ============================================================================

@app.get("/")
def root():
    """
    Root endpoint - API health check
    """
    return {
        "status": "online",
        "api_name": "NASA API",
        "endpoints": {
            "nasa_api": ["/api/nasa?start_date=YYYY-MM-DD&end_date=YYYY-MM-DD"],
            "documentation": ["/documentation"],
        },
    }

# ============================================================================
# RUN SERVER
# ============================================================================

if __name__ == "__main__":
    logger.info("Documentation at http://%s:%s/documentation", settings.host, settings.port)
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
