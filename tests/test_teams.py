"""Tests for the Teams Adaptive Card renderer."""

import json

from teamsrelay.channels.format_value import format_value
from teamsrelay.channels.teams import adaptive_card, format_teams


def test_adaptive_card_filters_none_facts():
    card = adaptive_card(
        title="Title",
        color="123456",
        facts=[("A", "1"), ("B", None), ("C", 3), ("D", False)],
        url="https://example.com/a",
    )

    assert card["body"][1]["facts"] == [
        {"title": "A", "value": "1"},
        {"title": "C", "value": "3"},
        {"title": "D", "value": "No"},
    ]


def test_adaptive_card_title_block():
    card = adaptive_card(title="Hello", color="ABCDEF", facts=[], url="https://example.com")

    assert card["body"][0] == {
        "type": "TextBlock",
        "text": "Hello",
        "weight": "bolder",
        "size": "large",
        "color": "ABCDEF",
    }


def test_adaptive_card_actions_in_fixed_order():
    card = adaptive_card(
        title="T",
        color="000000",
        facts=[],
        url="https://example.com/primary",
        secondary_url="https://example.com/secondary",
    )

    assert card["body"][2] == {
        "type": "ActionSet",
        "actions": [
            {"type": "Action.OpenUrl", "title": "View in Chromatic", "url": "https://example.com/primary"},
            {"type": "Action.OpenUrl", "title": "View Storybook", "url": "https://example.com/secondary"},
        ],
    }


def test_format_value():
    assert format_value(None) is None
    assert format_value(True) == "Yes"
    assert format_value(False) == "No"
    assert format_value(0) == "0"
    assert format_value("abc") == "abc"
    assert format_value("x" * 10, max_len=4) == "xxxx..."


def test_format_teams():
    card = adaptive_card(title="T", color="000000", facts=[("A", "1")], url="https://example.com")

    payload = format_teams("https://example.webhook.office.com/hook", card)

    assert payload.method == "POST"
    assert payload.url == "https://example.webhook.office.com/hook"
    assert payload.headers == {"Content-Type": "application/json"}
    assert json.loads(payload.body) == card
