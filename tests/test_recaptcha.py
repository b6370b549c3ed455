import httpx
import pytest

from signup.core.recaptcha import RecaptchaVerifier

VERIFY_URL = "https://recaptcha.test/siteverify"


def make_verifier(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return RecaptchaVerifier(client, "server-secret", VERIFY_URL)


async def test_sends_secret_and_token_as_query_params():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"success": True})

    assert await make_verifier(handler).verify("tok-1") is True

    [request] = seen
    assert request.method == "POST"
    assert request.url.host == "recaptcha.test"
    assert request.url.params["secret"] == "server-secret"
    assert request.url.params["response"] == "tok-1"


@pytest.mark.parametrize(
    "body",
    [
        {"success": False, "error-codes": ["invalid-input-response"]},
        {"score": 0.9},
        ["success"],
    ],
)
async def test_falsy_or_odd_body_fails(body):
    verifier = make_verifier(lambda request: httpx.Response(200, json=body))
    assert await verifier.verify("tok") is False


async def test_non_2xx_fails():
    verifier = make_verifier(lambda request: httpx.Response(503, json={"success": True}))
    assert await verifier.verify("tok") is False


async def test_non_json_body_fails():
    verifier = make_verifier(lambda request: httpx.Response(200, text="<html>"))
    assert await verifier.verify("tok") is False


async def test_transport_error_fails_closed():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    assert await make_verifier(handler).verify("tok") is False
