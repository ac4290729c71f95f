import pytest
from httpx import AsyncClient

from app.domain.leetcode import errors

PROFILE_KEYS = {
	"username",
	"ranking",
	"avatar",
	"countryName",
	"reputation",
	"starRating",
	"aboutMe",
	"realName",
	"school",
	"websites",
	"skillTags",
	"submitStats",
	"recentSubmissions",
}


@pytest.mark.asyncio
async def test_post_profile_returns_camel_case_contract(api_client: AsyncClient, override_upstream, make_stub):
	stub = make_stub()
	override_upstream(stub)

	response = await api_client.post("/api/profile", json={"username": " supreme-solver "})

	assert response.status_code == 200
	profile = response.json()["profile"]
	assert set(profile) == PROFILE_KEYS
	assert profile["ranking"] == 12345
	assert profile["submitStats"][0] == {"difficulty": "All", "count": 120, "submissions": 150}
	assert [s["timestamp"] for s in profile["recentSubmissions"]] == [1700003600, 1700000000]
	assert profile["recentSubmissions"][0]["titleSlug"] == "median-of-two-sorted-arrays"
	assert stub.calls == ["supreme-solver"]


@pytest.mark.asyncio
async def test_get_profile_by_path(api_client: AsyncClient, override_upstream, make_stub):
	override_upstream(make_stub())
	response = await api_client.get("/api/profile/supreme-solver")
	assert response.status_code == 200
	assert response.json()["profile"]["username"] == "supreme-solver"


@pytest.mark.asyncio
async def test_absent_fields_serialised_as_null(api_client: AsyncClient, override_upstream, make_stub, make_payload):
	override_upstream(make_stub(payload=make_payload(matched_user={"profile": {}}, recentAcSubmissionList=None)))
	response = await api_client.post("/api/profile", json={"username": "supreme-solver"})
	profile = response.json()["profile"]
	assert set(profile) == PROFILE_KEYS
	assert profile["aboutMe"] is None
	assert profile["websites"] == []
	assert profile["recentSubmissions"] == []


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{"username": "   "}, {"username": ""}, {}])
async def test_blank_username_is_400_without_upstream_call(api_client: AsyncClient, override_upstream, make_stub, body):
	stub = make_stub()
	override_upstream(stub)

	response = await api_client.post("/api/profile", json=body)

	assert response.status_code == 400
	payload = response.json()
	assert payload["error"] == errors.InputError.message
	assert payload["reason"] == "invalid_username"
	assert payload["request_id"] == response.headers["x-request-id"]
	assert stub.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("username", [123, ["supreme-solver"], True, {"name": "supreme-solver"}])
async def test_non_string_username_is_400_without_upstream_call(
	api_client: AsyncClient, override_upstream, make_stub, username
):
	stub = make_stub()
	override_upstream(stub)

	response = await api_client.post("/api/profile", json={"username": username})

	assert response.status_code == 400
	payload = response.json()
	assert payload["error"] == errors.InputError.message
	assert payload["reason"] == "invalid_username"
	assert stub.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
	"upstream_error,status_code,kind",
	[
		(errors.UpstreamNotFound("That user does not exist."), 404, errors.ProfileNotFound),
		(errors.UpstreamTimeout("read timeout"), 503, errors.UpstreamUnavailable),
		(errors.UpstreamRateLimited("429"), 503, errors.UpstreamUnavailable),
		(errors.UpstreamProtocolError("Cannot query field 'x'"), 502, errors.UnexpectedUpstreamShape),
	],
)
async def test_upstream_failures_map_to_stable_messages(
	api_client: AsyncClient, override_upstream, make_stub, upstream_error, status_code, kind
):
	override_upstream(make_stub(error=upstream_error))

	response = await api_client.post("/api/profile", json={"username": "ghost"})

	assert response.status_code == status_code
	payload = response.json()
	assert payload["error"] == kind.message
	assert payload["reason"] == kind.reason
	assert upstream_error.detail not in response.text


@pytest.mark.asyncio
async def test_request_id_is_echoed(api_client: AsyncClient, override_upstream, make_stub):
	override_upstream(make_stub())
	response = await api_client.post(
		"/api/profile",
		json={"username": "supreme-solver"},
		headers={"X-Request-Id": "req-123"},
	)
	assert response.headers["x-request-id"] == "req-123"
