"""Profile aggregation: upstream fetch, normalisation, and error classification."""

from __future__ import annotations

import logging
from typing import Optional

from app.domain.leetcode import normalizer
from app.domain.leetcode.client import UpstreamClient
from app.domain.leetcode.errors import (
	InputError,
	MalformedResponse,
	ProfileError,
	UpstreamError,
	classify,
)
from app.domain.leetcode.schemas import Profile
from app.obs import metrics as obs_metrics

LOGGER = logging.getLogger("lcprofile.profile")


def clean_username(username: Optional[str]) -> str:
	"""Trim the username and reject blank input.

	Case and any other canonicalisation are left to the upstream platform.
	"""
	if username is None or not isinstance(username, str):
		raise InputError()
	trimmed = username.strip()
	if not trimmed:
		raise InputError()
	return trimmed


class ProfileAggregator:
	"""Fetch a username's profile, returning a complete Profile or raising a ProfileError."""

	def __init__(self, client: UpstreamClient) -> None:
		self._client = client

	async def fetch_profile(self, username: Optional[str]) -> Profile:
		try:
			trimmed = clean_username(username)
		except InputError:
			obs_metrics.inc_profile_fetch(InputError.reason)
			raise
		try:
			raw = await self._client.fetch_raw(trimmed)
			profile = normalizer.normalize(raw)
		except (UpstreamError, MalformedResponse) as exc:
			error = classify(exc)
			obs_metrics.inc_profile_fetch(error.reason)
			LOGGER.warning(
				"leetcode_profile_failed",
				extra={"reason": error.reason, "cause": type(exc).__name__, "username": trimmed},
			)
			raise error from exc
		obs_metrics.inc_profile_fetch("ok")
		LOGGER.info(
			"leetcode_profile_fetched",
			extra={
				"username": profile.username,
				"recent_submissions": len(profile.recent_submissions),
			},
		)
		return profile


async def fetch_profile(username: Optional[str], *, client: UpstreamClient) -> Profile:
	return await ProfileAggregator(client).fetch_profile(username)


__all__ = ["ProfileAggregator", "ProfileError", "clean_username", "fetch_profile"]
