"""LeetCode profile lookup endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request

from app.domain.leetcode import schemas
from app.domain.leetcode.client import LeetCodeGraphQLClient, UpstreamClient
from app.domain.leetcode.service import ProfileAggregator

router = APIRouter(prefix="/api", tags=["profile"])

_ERROR_RESPONSES = {
	400: {"model": schemas.ErrorResponse},
	404: {"model": schemas.ErrorResponse},
	502: {"model": schemas.ErrorResponse},
	503: {"model": schemas.ErrorResponse},
}


def get_upstream_client(request: Request) -> UpstreamClient:
	"""Build a GraphQL client over the application's shared httpx client."""
	return LeetCodeGraphQLClient(http=request.app.state.http_client)


def get_aggregator(client: UpstreamClient = Depends(get_upstream_client)) -> ProfileAggregator:
	return ProfileAggregator(client)


@router.post("/profile", response_model=schemas.ProfileResponse, responses=_ERROR_RESPONSES)
async def lookup_profile(
	payload: Optional[schemas.ProfileRequest] = None,
	aggregator: ProfileAggregator = Depends(get_aggregator),
) -> schemas.ProfileResponse:
	username = payload.username if payload else None
	profile = await aggregator.fetch_profile(username)
	return schemas.ProfileResponse(profile=profile)


@router.get("/profile/{username}", response_model=schemas.ProfileResponse, responses=_ERROR_RESPONSES)
async def get_profile(
	username: str,
	aggregator: ProfileAggregator = Depends(get_aggregator),
) -> schemas.ProfileResponse:
	profile = await aggregator.fetch_profile(username)
	return schemas.ProfileResponse(profile=profile)
