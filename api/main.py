import logging

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import Response

from config import Settings, get_settings
from handler import relay

logging.basicConfig(level=logging.INFO)

# REQUIRED: top-level ASGI app variable named exactly `app`
app = FastAPI(title="Azure DevOps GitHub hook")


async def get_http_client():
    # one client per invocation, nothing shared between requests
    async with httpx.AsyncClient() as client:
        yield client


@app.post("/api/github-hook")
async def github_hook(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    # Azure DevOps work item payload, forwarded as-is (no parsing)
    raw = (await request.body()).decode("utf-8", errors="replace")
    result = await relay(raw, settings, client)
    return Response(content=result.body, status_code=result.status_code, media_type="application/json")
