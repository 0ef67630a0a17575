from __future__ import annotations

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware

from rolodex.common.settings import get_settings
from rolodex.services.api.filters import install_pipeline
from rolodex.services.api.routers import countries, health, persons
from rolodex.services.api.templating import STATIC_DIR

cfg = get_settings()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Rolodex",
        version="0.1.0",
    )

    allow_origins = ["*"] if cfg.is_development else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    # Global header, request timing, exception handler
    install_pipeline(app)

    # Routers
    app.include_router(health.router)
    app.include_router(persons.router)
    app.include_router(countries.router)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR), check_dir=False), name="static")
    return app

app = create_app()
