"""Operations endpoints providing health checks and metrics."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from app.settings import settings

router = APIRouter(prefix="", tags=["ops"])


@router.get("/health/live")
async def health_live() -> dict[str, str]:
	return {"status": "ok"}


@router.get("/health/ready")
async def health_ready(request: Request) -> Response:
	http_client = getattr(request.app.state, "http_client", None)
	ready = http_client is not None and not http_client.is_closed
	payload = {"status": "ok" if ready else "unavailable", "upstream_client": ready}
	status_code = status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE
	return JSONResponse(content=payload, status_code=status_code)


@router.get("/metrics")
async def prometheus_metrics() -> Response:
	if not settings.obs_metrics_public:
		raise HTTPException(status.HTTP_404_NOT_FOUND, detail="not_found")
	payload = generate_latest()
	return Response(content=payload, media_type=CONTENT_TYPE_LATEST)
