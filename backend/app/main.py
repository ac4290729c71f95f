"""FastAPI application entrypoint."""

from __future__ import annotations

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import ops, profile
from app.api.errors import install_error_handlers
from app.api.middleware_request_id import RequestIdMiddleware
from app.obs import init as obs_init
from app.settings import settings


@asynccontextmanager
async def lifespan(app: FastAPI):
	# One pooled client per process; each request still makes a single upstream call
	timeout = httpx.Timeout(settings.leetcode_timeout_seconds)
	async with httpx.AsyncClient(timeout=timeout, follow_redirects=False) as client:
		app.state.http_client = client
		try:
			yield
		finally:
			app.state.http_client = None


app = FastAPI(title="LeetCode Profile API", version="1.0.0", lifespan=lifespan)

obs_init(app)
app.add_middleware(RequestIdMiddleware)
app.add_middleware(
	CORSMiddleware,
	allow_origins=list(settings.cors_allow_origins),
	allow_credentials=False,
	allow_methods=["GET", "POST"],
	allow_headers=["Content-Type", "X-Request-Id"],
	expose_headers=["X-Request-Id"],
)
install_error_handlers(app)

app.include_router(ops.router)
app.include_router(profile.router)
