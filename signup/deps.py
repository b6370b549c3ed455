from __future__ import annotations

from fastapi import Request

from signup.core.config import Settings
from signup.core.recaptcha import RecaptchaVerifier
from signup.db.store import UserStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_verifier(request: Request) -> RecaptchaVerifier:
    return request.app.state.verifier


def get_store(request: Request) -> UserStore:
    return request.app.state.store
