# handler.py
import json
import logging
from dataclasses import dataclass

import httpx

from config import ForwardMode, Settings

logger = logging.getLogger(__name__)

EVENT_TYPE = "azure-devops-event"
USER_AGENT = "GitHubPagesFunction"


@dataclass(frozen=True)
class RelayResult:
    status_code: int
    body: str


def build_headers(token: str) -> dict:
    return {
        "Content-Type": "application/json",
        "Accept": "application/vnd.github+json",
        "Authorization": f"Bearer {token}",
        "User-Agent": USER_AGENT,
    }


def build_body(raw: str, mode: ForwardMode) -> bytes:
    """Outbound body for ``raw``: the text itself, or wrapped in a dispatch envelope."""
    if mode == ForwardMode.ENVELOPE:
        envelope = {"event_type": EVENT_TYPE, "client_payload": {"body": raw}}
        return json.dumps(envelope, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    return raw.encode("utf-8")


async def relay(raw: str, settings: Settings, client: httpx.AsyncClient) -> RelayResult:
    """
    Forward an Azure DevOps payload to the GitHub dispatch endpoint.

    The upstream status and body come back untouched, errors included.
    Transport failures are not caught here.
    """
    if not settings.gh_pat:
        logger.warning("GH_PAT not set, upstream will reject the dispatch")

    url = settings.dispatch_url
    logger.info("Relaying %d chars to %s (mode=%s)", len(raw), url, settings.forward_mode.value)
    try:
        res = await client.post(
            url,
            content=build_body(raw, settings.forward_mode),
            headers=build_headers(settings.gh_pat),
            timeout=settings.upstream_timeout,
        )
    except httpx.HTTPError:
        logger.exception("Dispatch to %s failed", url)
        raise

    logger.info("Upstream replied %d", res.status_code)
    return RelayResult(status_code=res.status_code, body=res.text)
