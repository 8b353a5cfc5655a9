"""Base types for the Teams channel adapter."""

from dataclasses import dataclass
from typing import Any, Optional

# (label, value) pair shown in a card's FactSet; a None value is dropped.
Fact = tuple[str, Optional[Any]]


@dataclass(frozen=True)
class ChannelPayload:
    """Represents the HTTP request payload for a notification channel."""
    method: str
    url: str
    headers: dict[str, str]
    body: str  # JSON string
