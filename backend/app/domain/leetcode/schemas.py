"""Pydantic schemas for the aggregated LeetCode profile."""

from __future__ import annotations

from typing import Annotated, Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

Difficulty = Literal["All", "Easy", "Medium", "Hard"]

DIFFICULTY_ORDER: tuple[str, ...] = ("All", "Easy", "Medium", "Hard")


class _CamelModel(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class SubmitStat(_CamelModel):
	difficulty: Difficulty
	count: Annotated[int, Field(ge=0)]
	submissions: Annotated[int, Field(ge=0)]

	@model_validator(mode="after")
	def _submissions_cover_count(self) -> "SubmitStat":
		if self.submissions < self.count:
			raise ValueError("submissions must be >= count")
		return self


class Submission(_CamelModel):
	id: int
	title: str
	title_slug: str
	status_display: str
	lang: str
	timestamp: int


class Profile(_CamelModel):
	username: Annotated[str, Field(min_length=1)]
	ranking: Optional[int]
	avatar: Optional[str]
	country_name: Optional[str]
	reputation: Optional[int]
	star_rating: Optional[float]
	about_me: Optional[str]
	real_name: Optional[str]
	school: Optional[str]
	websites: List[str]
	skill_tags: List[str]
	submit_stats: List[SubmitStat]
	recent_submissions: List[Submission]

	@model_validator(mode="after")
	def _submit_stats_consistent(self) -> "Profile":
		seen = [stat.difficulty for stat in self.submit_stats]
		if len(seen) != len(set(seen)):
			raise ValueError("duplicate difficulty in submitStats")
		if seen and "All" not in seen:
			raise ValueError("submitStats missing aggregate 'All' entry")
		return self


class ProfileRequest(BaseModel):
	# Left untyped so non-string input reaches the aggregator as an InputError
	username: Any = None


class ProfileResponse(BaseModel):
	profile: Profile


class ErrorResponse(BaseModel):
	error: str
	reason: str
	request_id: Optional[str] = None
