from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable

import httpx
from pydantic import ValidationError

from signup.schemas.register import RegisterForm

logger = logging.getLogger(__name__)

RECAPTCHA_ACTION = "register"
REGISTER_PATH = "/api/register"

MSG_NOT_LOADED = "reCAPTCHA not loaded"
MSG_NO_TOKEN = "reCAPTCHA token is required"
MSG_FAILED = "Failed to create user"

# executes the bot-verification widget for an action and returns its token
TokenProvider = Callable[[str], Awaitable[str | None]]


@dataclass
class FormState:
    is_loading: bool = False
    error: str | None = None
    success: bool = False
    field_errors: dict[str, str] = field(default_factory=dict)


class RegistrationForm:
    """Client side of the registration flow.

    Validates typed values, fetches a bot-verification token and posts the
    result to the registration endpoint, tracking what the page should show.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        execute_recaptcha: TokenProvider | None,
        path: str = REGISTER_PATH,
    ):
        self.client = client
        self.execute_recaptcha = execute_recaptcha
        self.path = path
        self.state = FormState()

    def validate(self, values: dict[str, str]) -> RegisterForm | None:
        try:
            form = RegisterForm.model_validate(values)
        except ValidationError as e:
            errors: dict[str, str] = {}
            for item in e.errors():
                key = str(item["loc"][0]) if item["loc"] else "form"
                errors.setdefault(key, item["msg"])
            self.state.field_errors = errors
            return None
        self.state.field_errors = {}
        return form

    async def submit(self, values: dict[str, str]) -> FormState:
        if self.state.is_loading:
            return self.state

        self.state.error = None
        self.state.success = False
        form = self.validate(values)
        if form is None:
            return self.state

        self.state.is_loading = True
        try:
            await self._send(form)
        finally:
            self.state.is_loading = False
        return self.state

    async def _send(self, form: RegisterForm) -> None:
        if self.execute_recaptcha is None:
            self.state.error = MSG_NOT_LOADED
            return
        token = await self.execute_recaptcha(RECAPTCHA_ACTION)
        if not token:
            self.state.error = MSG_NO_TOKEN
            return

        payload = form.model_dump(by_alias=True)
        payload["recaptchaToken"] = token
        try:
            response = await self.client.post(self.path, json=payload)
        except httpx.HTTPError as e:
            logger.error("Registration request failed: %s", e)
            self.state.error = MSG_FAILED
            return

        if not response.is_success:
            self.state.error = _error_message(response)
            return
        self.state.success = True


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return MSG_FAILED
    if isinstance(body, dict):
        return body.get("error") or body.get("message") or MSG_FAILED
    return MSG_FAILED
