import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import sentry_sdk

from coverletter.api.v1.generate import router as generate_router
from coverletter.api.v1.health import router as health_router
from coverletter.core.config import settings

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn, environment=settings.app_env)

app = FastAPI(title="Cover Letter Studio API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(generate_router, prefix="/v1", tags=["Cover Letter"])
