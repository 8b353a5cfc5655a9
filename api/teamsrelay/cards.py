"""Turn Chromatic webhook payloads into Teams Adaptive Cards."""

import logging
from typing import Any, Callable, Optional

from pydantic import ValidationError

from teamsrelay.channels import Fact
from teamsrelay.channels.teams import adaptive_card
from teamsrelay.consts import BuildResult, Event, ReviewDecisionStatus
from teamsrelay.schemas.chromatic import (
    BuildUpdates,
    Review,
    ReviewDecision,
    ReviewUpdates,
    payload_adapter,
)

logger = logging.getLogger(__name__)

BUILD_COLOR = "439FE0"
REVIEW_COLOR = "E01E5A"
APPROVED_COLOR = "2EB886"
REJECTED_COLOR = "E01E5A"


def build_card(body: Any) -> Optional[dict]:
    """
    Build the card for a raw webhook body.

    Returns ``None`` for unknown events, malformed bodies and builds that did
    not succeed.
    """
    try:
        payload = payload_adapter.validate_python(body)
    except ValidationError as exc:
        logger.debug("Unrecognized Chromatic payload: %s", exc.error_count())
        return None

    formatter = _FORMATTERS.get(payload.event)
    return formatter(payload) if formatter else None


def _number(value: Optional[int]) -> Optional[str]:
    return None if value is None else f"#{value}"


def build_updates_card(p: BuildUpdates) -> Optional[dict]:
    build = p.build
    if build.result != BuildResult.SUCCESS.value:
        return None

    return adaptive_card(
        title="🚀 Chromatic Build Updates",
        color=BUILD_COLOR,
        facts=[
            ("Build", _number(build.number)),
            ("Status", build.status),
            ("Result", build.result),
            ("Project", build.project.name),
            ("Storybook URL", build.storybook_url),
            ("Web URL", build.project.web_url),
            ("Changes", build.change_count),
            ("Components", build.component_count),
            ("Specs", build.spec_count),
            ("Account Name", build.project.account_name),
        ],
        url=build.web_url,
        secondary_url=build.storybook_url,
    )


def _review_facts(review: Review) -> list[Fact]:
    return [
        ("Review", _number(review.number)),
        ("Title", review.title),
        ("Status", review.status),
        ("Base Ref", review.base_ref_name),
        ("Head Ref", review.head_ref_name),
        ("Is Cross Repository", review.is_cross_repository),
        ("Author Username", review.author.username),
    ]


def review_updates_card(p: ReviewUpdates) -> dict:
    return adaptive_card(
        title="👀 Review Updates",
        color=REVIEW_COLOR,
        facts=_review_facts(p.review),
        url=p.review.web_url,
    )


def review_decision_card(p: ReviewDecision) -> dict:
    decision = p.review_decision
    passed = decision.status == ReviewDecisionStatus.APPROVED.value
    color = APPROVED_COLOR if passed else REJECTED_COLOR
    emoji = "✅" if passed else "❌"
    title = f"{emoji} Review Decision"
    if decision.status:
        title = f"{title} {decision.status}"

    return adaptive_card(
        title=title,
        color=color,
        facts=[
            *_review_facts(decision.review),
            ("Reviewer", decision.reviewer.username),
        ],
        url=decision.review.web_url,
    )


_FORMATTERS: dict[str, Callable[[Any], Optional[dict]]] = {
    Event.BUILD_UPDATES.value: build_updates_card,
    Event.REVIEW_UPDATES.value: review_updates_card,
    Event.REVIEW_DECISION.value: review_decision_card,
}
