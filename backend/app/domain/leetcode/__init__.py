"""LeetCode profile domain exports."""

from .client import LeetCodeGraphQLClient, UpstreamClient
from .errors import (
	InputError,
	ProfileError,
	ProfileNotFound,
	UnexpectedUpstreamShape,
	UpstreamUnavailable,
)
from .normalizer import normalize
from .schemas import Profile, SubmitStat, Submission
from .service import ProfileAggregator, fetch_profile

__all__ = [
	"InputError",
	"LeetCodeGraphQLClient",
	"Profile",
	"ProfileAggregator",
	"ProfileError",
	"ProfileNotFound",
	"SubmitStat",
	"Submission",
	"UnexpectedUpstreamShape",
	"UpstreamClient",
	"UpstreamUnavailable",
	"fetch_profile",
	"normalize",
]
