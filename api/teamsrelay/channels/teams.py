"""Microsoft Teams channel adapter."""

import json
from typing import Iterable, Optional

from teamsrelay.channels import ChannelPayload, Fact
from teamsrelay.channels.format_value import format_value

CARD_SCHEMA = "http://adaptivecards.io/schemas/adaptive-card.json"
CARD_VERSION = "1.2"

PRIMARY_ACTION_TITLE = "View in Chromatic"
SECONDARY_ACTION_TITLE = "View Storybook"


def adaptive_card(
    title: str,
    color: str,
    facts: Iterable[Fact],
    url: Optional[str],
    secondary_url: Optional[str] = None,
) -> dict:
    """
    Render an Adaptive Card: a title TextBlock, a FactSet and an ActionSet.

    Facts whose value is ``None`` are left out. One ``Action.OpenUrl`` is
    emitted per URL given, primary first.
    """
    actions = [
        {"type": "Action.OpenUrl", "title": label, "url": target}
        for label, target in (
            (PRIMARY_ACTION_TITLE, url),
            (SECONDARY_ACTION_TITLE, secondary_url),
        )
        if target is not None
    ]

    return {
        "$schema": CARD_SCHEMA,
        "type": "AdaptiveCard",
        "version": CARD_VERSION,
        "body": [
            {
                "type": "TextBlock",
                "text": title,
                "weight": "bolder",
                "size": "large",
                "color": color,
            },
            {
                "type": "FactSet",
                "facts": [
                    {"title": name, "value": format_value(value)}
                    for name, value in facts
                    if value is not None
                ],
            },
            {
                "type": "ActionSet",
                "actions": actions,
            },
        ],
    }


def format_teams(webhook_url: str, card: dict) -> ChannelPayload:
    """Wrap a card into the POST sent to the Teams webhook."""
    return ChannelPayload(
        method="POST",
        url=webhook_url,
        headers={"Content-Type": "application/json"},
        body=json.dumps(card),
    )
