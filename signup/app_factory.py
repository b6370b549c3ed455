from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from signup.core.config import Settings
from signup.core.recaptcha import RecaptchaVerifier
from signup.db.database import Database
from signup.db.store import UserStore
from signup.routers.register import router as register_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = Database(settings.database_url)
        if settings.db_create_tables:
            await db.create_tables()
        client = httpx.AsyncClient()

        app.state.db = db
        app.state.store = UserStore(db, use_procedure=settings.db_use_procedure)
        app.state.verifier = RecaptchaVerifier(
            client, settings.recaptcha_secret_key, settings.recaptcha_verify_url
        )
        logger.info(
            "Registration service started (db=%s, hash=%s, procedure=%s)",
            db.dialect,
            settings.hash_type,
            app.state.store.use_procedure,
        )
        try:
            yield
        finally:
            await client.aclose()
            await db.close()

    app = FastAPI(title="Player Registration", lifespan=lifespan)
    app.state.settings = settings
    app.include_router(register_router)
    return app

