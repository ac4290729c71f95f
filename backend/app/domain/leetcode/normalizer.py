"""Pure mapping from a raw LeetCode GraphQL payload to the canonical Profile.

Every read is defensive: the upstream schema is treated as untrusted even for
fields its documentation marks as required. A missing key, ``None`` and a
blank string all mean "absent" and become ``None`` (or ``[]`` for lists).
Anything that cannot be shaped into a valid Profile raises
``MalformedResponse``; nothing here performs I/O.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from app.domain.leetcode.errors import MalformedResponse
from app.domain.leetcode.schemas import DIFFICULTY_ORDER, Profile, SubmitStat, Submission

RawPayload = Mapping[str, Any]

_INT_RE = re.compile(r"^[+-]?\d+$")


def _absent(value: Any) -> bool:
	return value is None or (isinstance(value, str) and not value.strip())


def _mapping(value: Any, field: str) -> Mapping[str, Any]:
	if value is None:
		return {}
	if not isinstance(value, Mapping):
		raise MalformedResponse(f"{field} is not an object")
	return value


def _sequence(value: Any, field: str) -> list[Any]:
	if value is None:
		return []
	if not isinstance(value, list):
		raise MalformedResponse(f"{field} is not a list")
	return value


def _text(value: Any, field: str) -> Optional[str]:
	if _absent(value):
		return None
	if not isinstance(value, str):
		raise MalformedResponse(f"{field} is not a string")
	return value


def _required_text(value: Any, field: str) -> str:
	text = _text(value, field)
	if text is None:
		raise MalformedResponse(f"{field} is missing")
	return text


def _int(value: Any, field: str) -> Optional[int]:
	if _absent(value):
		return None
	if isinstance(value, bool):
		raise MalformedResponse(f"{field} is not numeric")
	if isinstance(value, int):
		return value
	if isinstance(value, float):
		if not value.is_integer():
			raise MalformedResponse(f"{field} is not an integer")
		return int(value)
	if isinstance(value, str) and _INT_RE.match(value.strip()):
		return int(value.strip())
	raise MalformedResponse(f"{field} is not an integer")


def _required_int(value: Any, field: str) -> int:
	number = _int(value, field)
	if number is None:
		raise MalformedResponse(f"{field} is missing")
	return number


def _float(value: Any, field: str) -> Optional[float]:
	if _absent(value):
		return None
	if isinstance(value, bool):
		raise MalformedResponse(f"{field} is not numeric")
	if isinstance(value, (int, float)):
		number = float(value)
	elif isinstance(value, str):
		try:
			number = float(value.strip())
		except ValueError:
			raise MalformedResponse(f"{field} is not numeric") from None
	else:
		raise MalformedResponse(f"{field} is not numeric")
	if not math.isfinite(number):
		raise MalformedResponse(f"{field} is not finite")
	return number


def _string_list(value: Any, field: str) -> list[str]:
	items: list[str] = []
	for idx, item in enumerate(_sequence(value, field)):
		text = _text(item, f"{field}[{idx}]")
		if text is not None:
			items.append(text)
	return items


def _submit_stats(raw: Any) -> list[SubmitStat]:
	container = _mapping(raw, "submitStats")
	stats: list[SubmitStat] = []
	for idx, entry in enumerate(_sequence(container.get("acSubmissionNum"), "submitStats.acSubmissionNum")):
		where = f"submitStats.acSubmissionNum[{idx}]"
		entry = _mapping(entry, where)
		difficulty = _required_text(entry.get("difficulty"), f"{where}.difficulty")
		if difficulty not in DIFFICULTY_ORDER:
			raise MalformedResponse(f"{where}.difficulty is unknown")
		stats.append(
			SubmitStat(
				difficulty=difficulty,
				count=_required_int(entry.get("count"), f"{where}.count"),
				submissions=_required_int(entry.get("submissions"), f"{where}.submissions"),
			)
		)
	stats.sort(key=lambda stat: DIFFICULTY_ORDER.index(stat.difficulty))
	return stats


def _submissions(raw: Any) -> list[Submission]:
	submissions: list[Submission] = []
	for idx, entry in enumerate(_sequence(raw, "recentAcSubmissionList")):
		where = f"recentAcSubmissionList[{idx}]"
		entry = _mapping(entry, where)
		submissions.append(
			Submission(
				id=_required_int(entry.get("id"), f"{where}.id"),
				title=_required_text(entry.get("title"), f"{where}.title"),
				title_slug=_required_text(entry.get("titleSlug"), f"{where}.titleSlug"),
				status_display=_required_text(entry.get("statusDisplay"), f"{where}.statusDisplay"),
				lang=_required_text(entry.get("lang"), f"{where}.lang"),
				timestamp=_required_int(entry.get("timestamp"), f"{where}.timestamp"),
			)
		)
	# sorted() is stable, so equal timestamps keep upstream order
	return sorted(submissions, key=lambda item: item.timestamp, reverse=True)


def normalize(raw: RawPayload) -> Profile:
	"""Build a validated Profile from the GraphQL ``data`` object."""
	if not isinstance(raw, Mapping):
		raise MalformedResponse("payload is not an object")
	user = _mapping(raw.get("matchedUser"), "matchedUser")
	username = _text(user.get("username"), "matchedUser.username")
	if username is None:
		raise MalformedResponse("matchedUser.username is missing")
	profile = _mapping(user.get("profile"), "matchedUser.profile")
	try:
		return Profile(
			username=username.strip(),
			ranking=_int(profile.get("ranking"), "profile.ranking"),
			avatar=_text(profile.get("userAvatar"), "profile.userAvatar"),
			country_name=_text(profile.get("countryName"), "profile.countryName"),
			reputation=_int(profile.get("reputation"), "profile.reputation"),
			star_rating=_float(profile.get("starRating"), "profile.starRating"),
			about_me=_text(profile.get("aboutMe"), "profile.aboutMe"),
			real_name=_text(profile.get("realName"), "profile.realName"),
			school=_text(profile.get("school"), "profile.school"),
			websites=_string_list(profile.get("websites"), "profile.websites"),
			skill_tags=_string_list(profile.get("skillTags"), "profile.skillTags"),
			submit_stats=_submit_stats(user.get("submitStats")),
			recent_submissions=_submissions(raw.get("recentAcSubmissionList")),
		)
	except ValidationError as exc:
		raise MalformedResponse(f"profile failed validation: {exc.error_count()} error(s)") from exc
