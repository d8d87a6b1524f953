"""
FastAPI API for Lease Check
"""
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List

from leasecheck import (
    LeaseChecker,
    InvalidRequestError,
    EventParseError,
    ConfigurationError
)
from leasecheck.config import SETTINGS

# Configure logging
logging.basicConfig(
    level=getattr(logging, SETTINGS.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("leasecheck-api")

# Initialize FastAPI app
app = FastAPI(
    title="Lease Check API",
    description="API for resolving mineral ownership of a tract from its title chain",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=SETTINGS.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize checker (singleton)
checker = None

def get_checker() -> LeaseChecker:
    """Get or create checker instance"""
    global checker
    if checker is None:
        problems = SETTINGS.validate()
        if problems:
            raise ConfigurationError("; ".join(problems))
        checker = LeaseChecker()
    return checker


# Request/Response Models
class LeaseOverrideModel(BaseModel):
    """Analyst-supplied facts about one lease"""
    production_present: bool = False
    top_lease: Optional[bool] = None
    boundary_pugh: bool = False
    depth_pugh: bool = False


class RunLeaseCheckRequest(BaseModel):
    """Request model for a lease check run"""
    events: List[Any] = Field(default_factory=list, description="Normalized instrument events; rows that fail to normalize are skipped")
    tract_key: str = Field("", description="Tract identifier, e.g. '12N-5W-14'")
    as_of: Optional[str] = Field(None, description="Informational as-of date (YYYY-MM-DD)")
    hbp: bool = Field(False, description="Held by production")
    total_acres: Optional[float] = Field(None, description="Gross acres in the tract (default 160)")
    lease_overrides: Optional[Dict[str, LeaseOverrideModel]] = Field(
        None, description="Per-lease production / Pugh facts keyed by doc id"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "tract_key": "12N-5W Sec 14",
                "hbp": False,
                "total_acres": 160,
                "events": [
                    {
                        "instrument_type": "WD",
                        "recorded": "1952-03-01",
                        "grantors": [],
                        "grantees": ["John Doe"],
                        "fraction_whole": "1/1",
                        "tracts": [{"trs": "12n-5w", "sec": "14"}],
                        "doc_id": "Bk 120 Pg 44"
                    }
                ]
            }
        }


class ClassifyEventRequest(BaseModel):
    """Request model for classifying a single event"""
    event: Dict[str, Any] = Field(..., description="One instrument event")


# API Endpoints
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Lease Check API",
        "version": "1.0.0",
        "endpoints": {
            "POST /lease-check/run": "Resolve ownership and lease status for a tract",
            "POST /lease-check/classify": "Show how a single event is classified",
            "GET /health": "Health check"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    try:
        chk = get_checker()
        return {
            "status": "healthy",
            "checker_initialized": True,
            "instrument_aliases_loaded": len(chk.normalizer.aliases) > 0
        }
    except ConfigurationError as e:
        return {
            "status": "unhealthy",
            "error": str(e)
        }


@app.post("/lease-check/run", response_model=Dict[str, Any])
async def run_lease_check(request: RunLeaseCheckRequest):
    """
    Resolve mineral ownership for a tract.

    This endpoint:
    1. Normalizes the submitted events (rows that fail are skipped)
    2. Keeps the events that match the tract key
    3. Replays them chronologically into an ownership ledger
    4. Returns owners ranked by net acres plus review flags
    """
    try:
        if not request.events or not request.tract_key.strip():
            raise InvalidRequestError("events[] and tract_key are required")

        overrides = None
        if request.lease_overrides:
            overrides = {key: value.model_dump() for key, value in request.lease_overrides.items()}

        return get_checker().run(
            request.events,
            request.tract_key,
            as_of=request.as_of,
            hbp=request.hbp,
            total_acres=request.total_acres,
            lease_overrides=overrides,
        )

    except InvalidRequestError as e:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "InvalidRequestError",
                "message": str(e),
                "type": "invalid_request"
            }
        )
    except ConfigurationError as e:
        logger.error("lease-check configuration error: %s", e)
        raise HTTPException(
            status_code=500,
            detail={
                "error": "ConfigurationError",
                "message": str(e),
                "type": "server_error"
            }
        )
    except Exception as e:
        logger.exception("lease-check run failed")
        raise HTTPException(
            status_code=500,
            detail={
                "error": "InternalServerError",
                "message": f"An unexpected error occurred: {str(e)}",
                "type": "server_error"
            }
        )


@app.post("/lease-check/classify")
async def classify_event(request: ClassifyEventRequest):
    """
    Normalize one event and report the classifier rule it falls under.

    Useful when a landman wants to see why an instrument was ignored.
    """
    try:
        chk = get_checker()
        instrument_type = chk.normalizer.normalize(request.event.get("instrument_type"))
        classification = chk.classify_event(request.event)
        return {
            "instrument_type": instrument_type.value,
            "action": classification.action.value,
            "rule": classification.rule,
            "note": classification.note
        }
    except EventParseError as e:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "EventParseError",
                "message": str(e),
                "type": "invalid_event"
            }
        )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
