import hashlib
import hmac
import json

import pytest

from api.connectors.whatsapp.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)


def _sign(payload: bytes, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()
    return f"sha256={digest}"


def test_parse_webhook_request_ok() -> None:
    secret = "secret"
    body = json.dumps({"entry": []}).encode("utf-8")
    headers = {"x-hub-signature-256": _sign(body, secret)}

    payload, result = parse_webhook_request(body, headers, secret)

    assert payload == {"entry": []}
    assert result.valid is True


def test_parse_webhook_request_without_secret_skips_signature() -> None:
    payload, result = parse_webhook_request(b'{"object": "x"}', {}, None)

    assert payload == {"object": "x"}
    assert result.skipped is True


def test_parse_webhook_request_invalid_signature() -> None:
    secret = "secret"
    body = json.dumps({"entry": []}).encode("utf-8")
    headers = {"x-hub-signature-256": "sha256=deadbeef"}

    with pytest.raises(InvalidSignatureError, match="signature"):
        parse_webhook_request(body, headers, secret)


def test_parse_webhook_request_invalid_json() -> None:
    secret = "secret"
    body = b"{invalid}"
    headers = {"x-hub-signature-256": _sign(body, secret)}

    with pytest.raises(InvalidJsonError, match="invalid_json"):
        parse_webhook_request(body, headers, secret)


@pytest.mark.parametrize(("body", "reason"), [(b"", "empty_body"), (b"[1, 2]", "payload_not_object")])
def test_parse_webhook_request_rejects_non_object(body: bytes, reason: str) -> None:
    with pytest.raises(InvalidJsonError, match=reason):
        parse_webhook_request(body, {}, None)
