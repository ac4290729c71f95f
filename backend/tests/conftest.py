import sys
from pathlib import Path
from typing import Any, Mapping

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Ensure backend package is importable when tests run from repo root
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
	sys.path.insert(0, str(BACKEND_ROOT))

from app.api import profile as profile_api
from app.domain.leetcode.errors import UpstreamError
from app.main import app


def make_raw_payload(**overrides: Any) -> dict[str, Any]:
	"""Return a GraphQL ``data`` object shaped like LeetCode's response."""
	user = {
		"username": "supreme-solver",
		"profile": {
			"ranking": 12345,
			"userAvatar": "https://assets.leetcode.com/users/supreme-solver/avatar.png",
			"realName": "Supreme Solver",
			"aboutMe": "I solve things.",
			"school": "Example University",
			"websites": ["https://example.com"],
			"countryName": "Canada",
			"skillTags": ["dynamic-programming", "graphs"],
			"reputation": 42,
			"starRating": 4.5,
		},
		"submitStats": {
			"acSubmissionNum": [
				{"difficulty": "All", "count": 120, "submissions": 150},
				{"difficulty": "Easy", "count": 60, "submissions": 70},
				{"difficulty": "Medium", "count": 50, "submissions": 60},
				{"difficulty": "Hard", "count": 10, "submissions": 20},
			]
		},
	}
	recent = [
		{
			"id": "1001",
			"title": "Two Sum",
			"titleSlug": "two-sum",
			"statusDisplay": "Accepted",
			"lang": "python3",
			"timestamp": "1700000000",
		},
		{
			"id": "1002",
			"title": "Median of Two Sorted Arrays",
			"titleSlug": "median-of-two-sorted-arrays",
			"statusDisplay": "Accepted",
			"lang": "cpp",
			"timestamp": "1700003600",
		},
	]
	profile_overrides = overrides.pop("profile", None)
	if profile_overrides is not None:
		user["profile"].update(profile_overrides)
	user.update(overrides.pop("matched_user", {}))
	payload = {"matchedUser": user, "recentAcSubmissionList": recent}
	payload.update(overrides)
	return payload


class StubUpstreamClient:
	"""Call-counting stand-in for the GraphQL client."""

	def __init__(self, payload: Mapping[str, Any] | None = None, error: UpstreamError | None = None) -> None:
		self.payload = payload if payload is not None else make_raw_payload()
		self.error = error
		self.calls: list[str] = []

	async def fetch_raw(self, username: str) -> Mapping[str, Any]:
		self.calls.append(username)
		if self.error is not None:
			raise self.error
		return self.payload


@pytest.fixture
def make_payload():
	return make_raw_payload


@pytest.fixture
def make_stub():
	return StubUpstreamClient


@pytest.fixture
def override_upstream():
	"""Install a stub upstream client on the app; returns a setter."""

	def _install(client) -> None:
		app.dependency_overrides[profile_api.get_upstream_client] = lambda: client

	try:
		yield _install
	finally:
		app.dependency_overrides.pop(profile_api.get_upstream_client, None)


@pytest_asyncio.fixture
async def api_client():
	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://testserver") as client:
		yield client
