from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from barberbook.core.settings import Settings


def add_cors_middleware(app: FastAPI, settings: Settings) -> None:
    """Allow the booking UI origins configured in CORS_ORIGINS."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH"],
        allow_headers=["*"],
    )
