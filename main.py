"""
Ghadi-Pala Calculator — FastAPI Backend v1.0
============================================
Endpoints:
  POST /api/ghadi-pala  — Birth time → Ghadi / Pala / Vighati since sunrise
  POST /api/sunrise     — Estimated sunrise for a date and location
  POST /api/pdf         — PDF report of a Ghadi-Pala calculation
  GET  /api/reference   — Unit table and worked example
  GET  /api/health      — Health check
"""

from datetime import date as CalendarDate
from typing import Optional, Union
import io

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from config import get_settings
from logging_config import setup_logging
from ghadi_engine import calculate_ghadi_pala
from ghadi_engine.core.errors import GhadiPalaError
from ghadi_engine.core.models import GeoCoordinate
from ghadi_engine.core.sunrise import estimate_sunrise, sunrise_minutes
from ghadi_engine.core.vedic_time import (
    SECONDS_PER_GHADI, SECONDS_PER_PALA, SECONDS_PER_VIGHATI,
)
from pdf_report import generate_pdf_report

settings = get_settings()
setup_logging(settings.log_level, json=settings.log_json)
log = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Vedic birth time in Ghadi, Pala and Vighati measured from sunrise",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Models ─────────────────────────────────────────────

class GhadiPalaRequest(BaseModel):
    birth_date:       str = Field(..., description="YYYY-MM-DD")
    birth_time:       str = Field(..., description="HH:MM or HH:MM:SS, local 24-hour clock")
    latitude:         Optional[Union[float, str]] = None
    longitude:        Optional[Union[float, str]] = None
    city_name:        Optional[str] = Field(None, max_length=200)
    manual_sunrise:   Optional[str] = Field(None,
                          description="HH:MM[:SS] on the birth date, or YYYY-MM-DDTHH:MM:SS")
    utc_offset_hours: Optional[float] = Field(None, ge=-12, le=14)


class SunriseRequest(BaseModel):
    date:             CalendarDate
    latitude:         float = Field(..., ge=-90,  le=90)
    longitude:        float = Field(..., ge=-180, le=180)
    utc_offset_hours: float = Field(0.0, ge=-12, le=14)


class PDFRequest(GhadiPalaRequest):
    name: Optional[str] = "Native"


# ── Utilities ──────────────────────────────────────────────────

def _calculate(data: GhadiPalaRequest):
    return calculate_ghadi_pala(
        birth_date=data.birth_date,
        birth_time=data.birth_time,
        latitude=data.latitude,
        longitude=data.longitude,
        manual_sunrise=data.manual_sunrise,
        city_name=data.city_name,
        utc_offset_hours=data.utc_offset_hours,
        arithmetic=settings.vighati_arithmetic,
    )


def _bad_request(e: GhadiPalaError, endpoint: str) -> HTTPException:
    log.warning("calculation_rejected", endpoint=endpoint, code=e.code, error=str(e))
    return HTTPException(status_code=400, detail=e.to_dict())


# ── Endpoints ──────────────────────────────────────────────────

@app.get("/api/health")
def health():
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "endpoints": [
            "POST /api/ghadi-pala",
            "POST /api/sunrise",
            "POST /api/pdf",
            "GET  /api/reference",
        ],
    }


@app.get("/api/reference")
def reference():
    return {
        "units": [
            {"name": "Ghadi", "seconds": SECONDS_PER_GHADI,
             "description": "1 Ghadi = 24 minutes = 1,440 seconds"},
            {"name": "Pala", "seconds": SECONDS_PER_PALA,
             "description": "1 Pala = 24 seconds"},
            {"name": "Vighati", "seconds": SECONDS_PER_VIGHATI,
             "description": "1 Vighati = 0.4 seconds"},
        ],
        "example": {
            "input": {
                "birth_date": "2025-07-31",
                "birth_time": "16:00:00",
                "city_name": "Kathmandu, Nepal",
                "latitude": 27.7172,
                "longitude": 85.3240,
                "utc_offset_hours": 5.75,
            },
            "expected": {
                "sunrise": "~05:24:00",
                "time_difference": "10h 36m",
                "result": "26 Ghadi 30 Pala 0 Vighati",
            },
            "published": {
                "sunrise": "~05:30:00",
                "time_difference": "10h 30m",
                "result": "26 Ghadi 15 Pala 0 Vighati",
            },
        },
    }


@app.post("/api/ghadi-pala")
def ghadi_pala_endpoint(data: GhadiPalaRequest):
    """
    Convert a birth time into Ghadi / Pala / Vighati elapsed since sunrise.

    Sunrise comes from `manual_sunrise` when given, otherwise it is estimated
    from latitude/longitude (optionally shifted by `utc_offset_hours`).
    """
    try:
        result = _calculate(data)
    except GhadiPalaError as e:
        raise _bad_request(e, "ghadi-pala")
    log.info("ghadi_pala", source=result.sunrise_source, ghadi=result.ghadi,
             pala=result.pala, vighati=result.vighati)
    return {"success": True, "result": result.as_dict()}


@app.post("/api/sunrise")
def sunrise_endpoint(data: SunriseRequest):
    try:
        coord = GeoCoordinate(data.latitude, data.longitude)
        sunrise = estimate_sunrise(data.date, coord, data.utc_offset_hours)
        minutes = sunrise_minutes(data.date, coord, data.utc_offset_hours)
    except GhadiPalaError as e:
        raise _bad_request(e, "sunrise")
    return {
        "success": True,
        "sunrise": {
            "time": sunrise.strftime("%H:%M:%S"),
            "datetime": sunrise.isoformat(timespec="seconds"),
            "minutes_from_midnight": round(minutes, 4),
            "same_day": sunrise.date() == data.date,
        },
    }


@app.post("/api/pdf")
def pdf_endpoint(data: PDFRequest):
    try:
        result = _calculate(data)
    except GhadiPalaError as e:
        raise _bad_request(e, "pdf")
    try:
        pdf_bytes = generate_pdf_report(result, data.name or "Native")
    except Exception as e:
        log.exception("pdf_failed")
        raise HTTPException(status_code=500, detail=str(e))
    filename = f"ghadi_pala_{data.birth_date}.pdf"
    return StreamingResponse(
        io.BytesIO(pdf_bytes),
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
