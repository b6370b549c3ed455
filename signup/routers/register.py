from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from signup.core.config import TEMPLATES_DIR, Settings
from signup.core.crypto import hash_password
from signup.core.errors import RegistrationError
from signup.core.recaptcha import RecaptchaVerifier
from signup.core.rules import (
    NAME_MIN_LENGTH,
    PASSWORD_MIN_LENGTH,
    check_email,
    check_name,
    check_password,
)
from signup.db.store import NewAccount, UserStore
from signup.deps import get_settings, get_store, get_verifier
from signup.schemas.register import ErrorResponse, RegisterResponse

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=TEMPLATES_DIR)

REQUIRED_FIELDS = ("name", "email", "password", "recaptchaToken")

MSG_INTERNAL = "Internal server error"
MSG_MISSING = "Missing required fields"
MSG_BOT = "Bot verification failed"
MSG_EXISTS = "User already exists"


def error(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
@router.get("/register", response_class=HTMLResponse)
async def register_page(request: Request, settings: Settings = Depends(get_settings)):
    return templates.TemplateResponse(
        request,
        "register.html",
        {
            "site_key": settings.recaptcha_site_key,
            "name_min_length": NAME_MIN_LENGTH,
            "password_min_length": PASSWORD_MIN_LENGTH,
        },
    )


@router.get("/api/health")
async def health():
    return JSONResponse({"ok": True})


@router.post(
    "/api/register",
    status_code=201,
    response_model=RegisterResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def register(
    request: Request,
    settings: Settings = Depends(get_settings),
    verifier: RecaptchaVerifier = Depends(get_verifier),
    store: UserStore = Depends(get_store),
):
    try:
        body = await request.json()
    except ValueError:
        logger.warning("Rejected registration with unparseable body")
        return error(MSG_INTERNAL, 500)

    try:
        return await _register(body, settings, verifier, store)
    except RegistrationError as e:
        return error(e.message, e.status_code)
    except Exception:
        logger.exception("Unhandled error during registration")
        return error(MSG_INTERNAL, 500)


async def _register(
    body, settings: Settings, verifier: RecaptchaVerifier, store: UserStore
) -> JSONResponse:
    if not isinstance(body, dict) or not all(body.get(f) for f in REQUIRED_FIELDS):
        return error(MSG_MISSING)

    name, email, password = body["name"], body["email"], body["password"]

    try:
        verified = await verifier.verify(str(body["recaptchaToken"]))
    except Exception:
        logger.exception("Bot verification raised for %r", name)
        verified = False
    if not verified:
        logger.info("Bot verification failed for %r", name)
        return error(MSG_BOT)

    for err in (check_name(name), check_email(email), check_password(password)):
        if err:
            logger.info("Rejected registration for %r: %s", name, err)
            return error(err)

    if await store.exists(name, email):
        logger.info("Registration for %r rejected: name or email taken", name)
        return error(MSG_EXISTS)

    account = NewAccount(
        name=name,
        email=email,
        password_hash=hash_password(name, password, settings.hash_type),
    )
    await store.create(account)

    logger.info("Created account %r", name)
    return JSONResponse(RegisterResponse().model_dump(), status_code=201)
