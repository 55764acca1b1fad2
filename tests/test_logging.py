"""Unit tests for log formatting and PII masking."""
import json
import logging

from weddingsite.logging_config import JSONFormatter, host_ctx, mask_pii, request_id_ctx


def test_mask_email_and_bearer():
    text = mask_pii("login anna.smith@example.com with Bearer abc.def.ghi")
    assert "anna.smith@" not in text
    assert "a***h@example.com" in text
    assert "abc.def.ghi" not in text


def test_json_formatter_includes_request_context():
    rid_token = request_id_ctx.set("abcd1234")
    host_token = host_ctx.set("ourwedding.example.com")
    try:
        record = logging.LogRecord("weddingsite.domain", logging.INFO, __file__, 1, "rewrote %s", ("/gallery",), None)
        entry = json.loads(JSONFormatter().format(record))
    finally:
        request_id_ctx.reset(rid_token)
        host_ctx.reset(host_token)

    assert entry["message"] == "rewrote /gallery"
    assert entry["request_id"] == "abcd1234"
    assert entry["host"] == "ourwedding.example.com"
    assert "user_id" not in entry
