import logging

import httpx
from fastapi import APIRouter, Depends, Request, Response

from teamsrelay.cards import build_card
from teamsrelay.channels.dispatcher import deliver, get_http_client
from teamsrelay.channels.teams import format_teams
from teamsrelay.config import Settings, get_settings

wh_logger = logging.getLogger("webhooks")

router = APIRouter(tags=["chromatic"])


async def _read_json(request: Request):
    # Anything that is not JSON is handled like an unrecognized event.
    try:
        return await request.json()
    except ValueError:
        return None


@router.api_route(
    "/api/chromatic",
    methods=["GET", "HEAD", "OPTIONS", "POST", "PUT", "PATCH", "DELETE"],
    summary="Receive a Chromatic webhook",
)
async def receive_chromatic(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    if request.method != "POST":
        wh_logger.info("Skipping message creation for method %s", request.method)
        return Response(status_code=405)

    body = await _read_json(request)
    card = build_card(body)

    if card is None:
        event = body.get("event") if isinstance(body, dict) else None
        wh_logger.info("Skipping message creation for event %s", event)
        return {"skipped": True}

    await deliver(format_teams(settings.teams_webhook_url, card), client)
    return {"ok": True}
