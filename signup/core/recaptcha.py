from __future__ import annotations

import logging

import httpx

from signup.core.config import DEFAULT_VERIFY_URL

logger = logging.getLogger(__name__)


class RecaptchaVerifier:
    """Exchanges a client token for a verdict from the reCAPTCHA siteverify API.

    Every failure mode (transport error, non-2xx status, unreadable body)
    counts as a failed verification.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        secret_key: str,
        verify_url: str = DEFAULT_VERIFY_URL,
    ):
        self.client = client
        self.secret_key = secret_key
        self.verify_url = verify_url

    async def verify(self, token: str) -> bool:
        try:
            response = await self.client.post(
                self.verify_url,
                params={"secret": self.secret_key, "response": token},
            )
        except httpx.HTTPError as e:
            logger.warning("reCAPTCHA request failed: %s", e)
            return False

        if not response.is_success:
            logger.warning("reCAPTCHA returned HTTP %s", response.status_code)
            return False

        try:
            data = response.json()
        except ValueError:
            logger.warning("reCAPTCHA returned a non-JSON body")
            return False

        if not isinstance(data, dict):
            return False
        if not data.get("success"):
            logger.info("reCAPTCHA rejected token: %s", data.get("error-codes", []))
            return False
        return True
