"""Failure taxonomy for LeetCode profile aggregation.

Two layers live here. ``UpstreamError`` subclasses and ``MalformedResponse``
are internal: they are raised by the GraphQL client and the normaliser and
may carry raw upstream text for logging. ``ProfileError`` subclasses form the
closed, externally stable set surfaced by the aggregator; their messages are
fixed strings and never include upstream detail.
"""

from __future__ import annotations


class UpstreamError(Exception):
	"""Base class for failures talking to the upstream platform."""

	reason: str = "upstream_error"

	def __init__(self, detail: str | None = None) -> None:
		super().__init__(detail or self.reason)
		self.detail = detail or self.reason


class UpstreamNotFound(UpstreamError):
	reason = "not_found"


class UpstreamRateLimited(UpstreamError):
	reason = "rate_limited"


class UpstreamNetworkFailure(UpstreamError):
	reason = "network_failure"


class UpstreamTimeout(UpstreamError):
	reason = "timeout"


class UpstreamProtocolError(UpstreamError):
	reason = "protocol_error"


class MalformedResponse(ValueError):
	"""Raised by the normaliser when the raw payload cannot form a Profile."""

	def __init__(self, detail: str) -> None:
		super().__init__(detail)
		self.detail = detail


class ProfileError(Exception):
	"""Classified failure with a stable, user-safe message and HTTP status."""

	reason: str = "unknown"
	message: str = "Unexpected error occurred."
	status_code: int = 500

	def __init__(self) -> None:
		super().__init__(self.message)


class InputError(ProfileError):
	reason = "invalid_username"
	message = "Please provide a LeetCode username."
	status_code = 400


class ProfileNotFound(ProfileError):
	reason = "profile_not_found"
	message = "No LeetCode profile exists for that username."
	status_code = 404


class UpstreamUnavailable(ProfileError):
	reason = "upstream_unavailable"
	message = "LeetCode is unavailable right now. Please try again later."
	status_code = 503


class UnexpectedUpstreamShape(ProfileError):
	reason = "unexpected_upstream_shape"
	message = "LeetCode returned an unexpected response."
	status_code = 502


_UPSTREAM_KINDS: dict[type[UpstreamError], type[ProfileError]] = {
	UpstreamNotFound: ProfileNotFound,
	UpstreamRateLimited: UpstreamUnavailable,
	UpstreamNetworkFailure: UpstreamUnavailable,
	UpstreamTimeout: UpstreamUnavailable,
	UpstreamProtocolError: UnexpectedUpstreamShape,
}


def classify(exc: Exception) -> ProfileError:
	"""Map an internal failure onto one of the external kinds."""
	if isinstance(exc, ProfileError):
		return exc
	if isinstance(exc, MalformedResponse):
		return UnexpectedUpstreamShape()
	if isinstance(exc, UpstreamError):
		for internal, external in _UPSTREAM_KINDS.items():
			if isinstance(exc, internal):
				return external()
		return UpstreamUnavailable()
	raise TypeError(f"cannot classify {type(exc).__name__}") from exc
