"""Chromatic webhook constants."""

from enum import Enum


class Event(str, Enum):
    BUILD_UPDATES = "build"
    REVIEW_UPDATES = "review"
    REVIEW_DECISION = "review-decision"


class BuildResult(str, Enum):
    SUCCESS = "SUCCESS"
    TIMEOUT = "TIMEOUT"
    CAPTURE_ERROR = "CAPTURE_ERROR"
    SYSTEM_ERROR = "SYSTEM_ERROR"
    BUILD_ERROR = "BUILD_ERROR"


class ReviewStatus(str, Enum):
    OPEN = "OPEN"
    MERGED = "MERGED"
    CLOSED = "CLOSED"


class ReviewDecisionStatus(str, Enum):
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
