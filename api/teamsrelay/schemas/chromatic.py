"""Chromatic webhook payloads.

Only the fields the relay renders are typed; every field is optional because
Chromatic omits keys freely and a partial payload should still produce a card.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter


def _none_as_empty(value: Any) -> Any:
    # Chromatic sends null for absent nested objects.
    return {} if value is None else value


Nullable = BeforeValidator(_none_as_empty)


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Project(_Payload):
    name: Optional[str] = None
    account_name: Optional[str] = Field(None, alias="accountName")
    account_avatar_url: Optional[str] = Field(None, alias="accountAvatarUrl")
    web_url: Optional[str] = Field(None, alias="webUrl")


class Person(_Payload):
    name: Optional[str] = None
    username: Optional[str] = None
    avatar_url: Optional[str] = Field(None, alias="avatarUrl")


class Build(_Payload):
    number: Optional[int] = None
    branch: Optional[str] = None
    commit: Optional[str] = None
    committer_name: Optional[str] = Field(None, alias="committerName")
    status: Optional[str] = None
    result: Optional[str] = None
    storybook_url: Optional[str] = Field(None, alias="storybookUrl")
    web_url: Optional[str] = Field(None, alias="webUrl")
    change_count: Optional[int] = Field(None, alias="changeCount")
    component_count: Optional[int] = Field(None, alias="componentCount")
    spec_count: Optional[int] = Field(None, alias="specCount")
    project: Annotated[Project, Nullable] = Field(default_factory=Project)


class Review(_Payload):
    number: Optional[int] = None
    title: Optional[str] = None
    status: Optional[str] = None
    base_ref_name: Optional[str] = Field(None, alias="baseRefName")
    head_ref_name: Optional[str] = Field(None, alias="headRefName")
    is_cross_repository: Optional[bool] = Field(None, alias="isCrossRepository")
    web_url: Optional[str] = Field(None, alias="webUrl")
    author: Annotated[Person, Nullable] = Field(default_factory=Person)


class Decision(_Payload):
    status: Optional[str] = None
    project: Annotated[Project, Nullable] = Field(default_factory=Project)
    review: Annotated[Review, Nullable] = Field(default_factory=Review)
    reviewer: Annotated[Person, Nullable] = Field(default_factory=Person)


class BuildUpdates(_Payload):
    version: Optional[int] = None
    event: Literal["build"]
    build: Annotated[Build, Nullable] = Field(default_factory=Build)


class ReviewUpdates(_Payload):
    version: Optional[int] = None
    event: Literal["review"]
    review: Annotated[Review, Nullable] = Field(default_factory=Review)


class ReviewDecision(_Payload):
    version: Optional[int] = None
    event: Literal["review-decision"]
    review_decision: Annotated[Decision, Nullable] = Field(
        default_factory=Decision, alias="reviewDecision"
    )


ChromaticPayload = Annotated[
    Union[BuildUpdates, ReviewUpdates, ReviewDecision],
    Field(discriminator="event"),
]

payload_adapter: TypeAdapter[ChromaticPayload] = TypeAdapter(ChromaticPayload)
