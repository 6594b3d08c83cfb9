# -*- coding: utf-8 -*-
"""
Main FastAPI application of the Event Hub workshop registration system.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from eventhub.config import settings
from eventhub.database import engine, Base
from eventhub.models import event, slot, topic, registration  # noqa: F401 (registers the tables)
from eventhub.routes import (events_fastapi, slots_fastapi, topics_fastapi,
                             registrations_fastapi, workshop_data_fastapi)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    filename=settings.LOG_FILE
)
logger = logging.getLogger(__name__)

# Create the tables
try:
    Base.metadata.create_all(bind=engine)
except Exception as e:
    logger.error(f"Error creating tables: {e}", exc_info=True)


docs_enabled = not settings.is_production

app = FastAPI(
    title="Event Hub API",
    description="Workshop registration: events, slots, topics and attendee registrations",
    version="1.0.0",
    docs_url="/docs" if docs_enabled else None,
    redoc_url="/redoc" if docs_enabled else None,
    openapi_url="/openapi.json" if docs_enabled else None
)

origins = [
    settings.FRONTEND_URL,
    "http://localhost:5700",
    "http://127.0.0.1:5700",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Missing or malformed fields are reported as 400 Bad Request."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid or missing fields", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


app.include_router(events_fastapi.router, prefix="/api/v1/events")
app.include_router(slots_fastapi.router, prefix="/api/v1/slots")
app.include_router(topics_fastapi.router, prefix="/api/v1/topics")
app.include_router(registrations_fastapi.router, prefix="/api/v1/registrations")
app.include_router(workshop_data_fastapi.router, prefix="/api/v1/workshop-data")


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": "Event Hub API - workshop registration",
        "documentation": "/docs",
        "endpoints": [
            {"events": "/api/v1/events"},
            {"slots": "/api/v1/slots"},
            {"topics": "/api/v1/topics"},
            {"registrations": "/api/v1/registrations"},
            {"workshop_data": "/api/v1/workshop-data"},
        ]
    }
