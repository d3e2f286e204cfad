"""Pydantic models describing what to provision."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ENV_PREFIX = "PUBSUB_PROJECT"


class SubscriptionSpec(BaseModel):
    """A decoded subscription token.

    ``push_endpoint`` holds the bare ``host:port`` pair; an empty string
    means a pull subscription.
    """

    model_config = ConfigDict(frozen=True)

    subscription_id: str
    push_endpoint: str = ""

    @property
    def is_push(self) -> bool:
        return self.push_endpoint != ""

    @property
    def push_url(self) -> str | None:
        """Endpoint handed to the service for push delivery."""
        if not self.is_push:
            return None
        return f"http://{self.push_endpoint}"


class ProjectSpec(BaseModel):
    """One project and its topic → subscription-token mapping."""

    model_config = ConfigDict(frozen=True)

    project_id: str
    topics: dict[str, list[str]]

    @field_validator("topics")
    @classmethod
    def validate_has_topics(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        if not v:
            msg = "Expected at least 1 topic to be defined"
            raise ValueError(msg)
        return v

    def subscriptions(self, topic_id: str) -> list[SubscriptionSpec]:
        """Decode the subscription tokens declared for *topic_id*."""
        from pubsubc.config.parser import decode_subscription

        return [decode_subscription(token) for token in self.topics[topic_id]]


class RunSettings(BaseModel):
    """Settings for a single CLI invocation, built once at startup."""

    model_config = ConfigDict(frozen=True)

    verbose: bool = False
    env_prefix: str = Field(default=DEFAULT_ENV_PREFIX, min_length=1)
    # Read by the Google client library itself; kept here for reporting.
    emulator_host: str | None = None
