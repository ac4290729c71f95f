import json
import logging

from app.obs import logging as obs_logging


def _record(msg: str, **extra) -> logging.LogRecord:
	record = logging.LogRecord("lcprofile.test", logging.INFO, __file__, 1, msg, None, None)
	for key, value in extra.items():
		setattr(record, key, value)
	return record


def test_formatter_emits_json_with_context():
	tokens = obs_logging.bind_context(request_id="rid-1", route="/api/profile")
	try:
		line = obs_logging.JSONLogFormatter().format(_record("leetcode_profile_fetched", username="solver"))
	finally:
		obs_logging.reset_context(tokens)
	payload = json.loads(line)
	assert payload["msg"] == "leetcode_profile_fetched"
	assert payload["level"] == "info"
	assert payload["request_id"] == "rid-1"
	assert payload["route"] == "/api/profile"
	assert payload["username"] == "solver"


def test_formatter_redacts_sensitive_extras():
	line = obs_logging.JSONLogFormatter().format(_record("http_request", authorization="Bearer x", body="{}"))
	payload = json.loads(line)
	assert payload["authorization"] == "[redacted]"
	assert payload["body"] == "[redacted]"


def test_formatter_truncates_long_values():
	line = obs_logging.JSONLogFormatter().format(_record("x", detail="a" * 1000, items=list(range(50))))
	payload = json.loads(line)
	assert len(payload["detail"]) <= 257
	assert payload["items"][-1] == "…"


def test_context_reset_clears_request_id():
	tokens = obs_logging.bind_context(request_id="rid-2")
	assert obs_logging.current_request_id() == "rid-2"
	obs_logging.reset_context(tokens)
	assert obs_logging.current_request_id() is None
