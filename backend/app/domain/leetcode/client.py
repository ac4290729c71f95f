"""GraphQL client for LeetCode's public profile API."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol

import httpx

from app.domain.leetcode.errors import (
	UpstreamError,
	UpstreamNetworkFailure,
	UpstreamNotFound,
	UpstreamProtocolError,
	UpstreamRateLimited,
	UpstreamTimeout,
)
from app.obs import metrics as obs_metrics
from app.settings import settings

LOGGER = logging.getLogger("lcprofile.upstream")

PROFILE_QUERY = """
query userPublicProfile($username: String!, $limit: Int!) {
  matchedUser(username: $username) {
    username
    profile {
      ranking
      userAvatar
      realName
      aboutMe
      school
      websites
      countryName
      skillTags
      reputation
      starRating
    }
    submitStats: submitStatsGlobal {
      acSubmissionNum {
        difficulty
        count
        submissions
      }
    }
  }
  recentAcSubmissionList(username: $username, limit: $limit) {
    id
    title
    titleSlug
    statusDisplay
    lang
    timestamp
  }
}
"""

_NOT_FOUND_HINTS = ("does not exist", "not found", "no such user")


class UpstreamClient(Protocol):
	"""Interface for fetching the raw profile payload for a username."""

	async def fetch_raw(self, username: str) -> Mapping[str, Any]:
		...


def _graphql_errors(body: Mapping[str, Any]) -> list[str]:
	errors = body.get("errors")
	if not errors:
		return []
	if not isinstance(errors, list):
		return [str(errors)]
	messages = []
	for error in errors:
		if isinstance(error, Mapping):
			messages.append(str(error.get("message") or "unknown graphql error"))
		else:
			messages.append(str(error))
	return messages


def _is_not_found(messages: list[str]) -> bool:
	return any(hint in message.lower() for message in messages for hint in _NOT_FOUND_HINTS)


def _check_status(response: httpx.Response) -> None:
	status_code = response.status_code
	if status_code == 429:
		raise UpstreamRateLimited("upstream returned 429")
	if status_code == 404:
		raise UpstreamNotFound("upstream returned 404")
	if status_code >= 500:
		raise UpstreamNetworkFailure(f"upstream returned {status_code}")
	if not response.is_success:
		raise UpstreamProtocolError(f"upstream returned {status_code}")


def _extract_data(response: httpx.Response) -> Mapping[str, Any]:
	try:
		body = response.json()
	except ValueError:
		raise UpstreamProtocolError("response body is not JSON") from None
	if not isinstance(body, Mapping):
		raise UpstreamProtocolError("response body is not an object")
	messages = _graphql_errors(body)
	data = body.get("data")
	if data is not None and not isinstance(data, Mapping):
		raise UpstreamProtocolError("data is not an object")
	matched = data.get("matchedUser") if data else None
	if messages:
		if matched is None and _is_not_found(messages):
			raise UpstreamNotFound(messages[0])
		raise UpstreamProtocolError("; ".join(messages))
	if data is None:
		raise UpstreamProtocolError("response has no data")
	if "matchedUser" not in data:
		raise UpstreamProtocolError("matchedUser missing from data")
	if matched is None:
		raise UpstreamNotFound("matchedUser is null")
	return data


@dataclass
class LeetCodeGraphQLClient(UpstreamClient):
	"""Single-attempt GraphQL fetch over a caller-owned ``httpx.AsyncClient``."""

	http: httpx.AsyncClient
	# Defaults read the live settings at construction time
	endpoint: str = field(default_factory=lambda: settings.leetcode_graphql_url)
	timeout: float = field(default_factory=lambda: settings.leetcode_timeout_seconds)
	recent_limit: int = field(default_factory=lambda: settings.leetcode_recent_limit)
	user_agent: str = field(default_factory=lambda: settings.leetcode_user_agent)

	def _headers(self, username: str) -> dict[str, str]:
		return {
			"Content-Type": "application/json",
			"User-Agent": self.user_agent,
			"Origin": "https://leetcode.com",
			"Referer": f"https://leetcode.com/u/{username}/",
		}

	async def fetch_raw(self, username: str) -> Mapping[str, Any]:
		if not username or not username.strip():
			raise ValueError("username must be a non-empty string")
		payload = {
			"operationName": "userPublicProfile",
			"query": PROFILE_QUERY,
			"variables": {"username": username, "limit": self.recent_limit},
		}
		start = time.perf_counter()
		outcome = "ok"
		try:
			try:
				response = await self.http.post(
					self.endpoint,
					json=payload,
					headers=self._headers(username),
					timeout=self.timeout,
				)
			except httpx.TimeoutException as exc:
				raise UpstreamTimeout(str(exc) or "request timed out") from exc
			except httpx.RequestError as exc:
				raise UpstreamNetworkFailure(str(exc) or type(exc).__name__) from exc
			_check_status(response)
			return _extract_data(response)
		except UpstreamError as exc:
			outcome = exc.reason
			raise
		except asyncio.CancelledError:
			outcome = "cancelled"
			raise
		finally:
			elapsed = time.perf_counter() - start
			obs_metrics.observe_upstream_call(outcome, elapsed)
			LOGGER.info(
				"leetcode_upstream_call",
				extra={"outcome": outcome, "latency_ms": round(elapsed * 1000, 3)},
			)
