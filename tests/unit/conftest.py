"""In-memory stand-in for the Pub/Sub admin clients."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Any

import pytest
from google.api_core.exceptions import AlreadyExists, NotFound

from pubsubc.clients import PubSubClients


@dataclass
class FakePubSubState:
    # full topic path -> None, insertion ordered
    topics: dict[str, None] = field(default_factory=dict)
    # full subscription path -> (full topic path, push endpoint)
    subscriptions: dict[str, tuple[str, str]] = field(default_factory=dict)
    opened: list[str] = field(default_factory=list)
    closed: list[str] = field(default_factory=list)


class FakePublisher:
    def __init__(self, state: FakePubSubState) -> None:
        self._state = state

    def create_topic(self, request: dict[str, Any]) -> SimpleNamespace:
        name = request["name"]
        if name in self._state.topics:
            raise AlreadyExists(f"Topic already exists: {name}")
        self._state.topics[name] = None
        return SimpleNamespace(name=name)

    def list_topics(self, request: dict[str, Any]) -> list[SimpleNamespace]:
        prefix = f"{request['project']}/topics/"
        return [
            SimpleNamespace(name=t) for t in self._state.topics if t.startswith(prefix)
        ]

    def list_topic_subscriptions(self, request: dict[str, Any]) -> list[str]:
        if request["topic"] not in self._state.topics:
            raise NotFound(f"Topic not found: {request['topic']}")
        return [
            name
            for name, (topic, _) in self._state.subscriptions.items()
            if topic == request["topic"]
        ]


class FakeSubscriber:
    def __init__(self, state: FakePubSubState) -> None:
        self._state = state

    def create_subscription(self, request: dict[str, Any]) -> SimpleNamespace:
        name = request["name"]
        if name in self._state.subscriptions:
            raise AlreadyExists(f"Subscription already exists: {name}")
        if request["topic"] not in self._state.topics:
            raise NotFound(f"Topic not found: {request['topic']}")
        endpoint = request.get("push_config", {}).get("push_endpoint", "")
        self._state.subscriptions[name] = (request["topic"], endpoint)
        return SimpleNamespace(name=name)

    def get_subscription(self, request: dict[str, Any]) -> SimpleNamespace:
        name = request["subscription"]
        if name not in self._state.subscriptions:
            raise NotFound(f"Subscription not found: {name}")
        topic, endpoint = self._state.subscriptions[name]
        return SimpleNamespace(
            name=name,
            topic=topic,
            push_config=SimpleNamespace(push_endpoint=endpoint),
        )


class FakePubSub:
    def __init__(self) -> None:
        self.state = FakePubSubState()
        self.publisher = FakePublisher(self.state)
        self.subscriber = FakeSubscriber(self.state)

    def clients(self, project_id: str) -> PubSubClients:
        return PubSubClients(
            project_id=project_id,
            publisher=self.publisher,
            subscriber=self.subscriber,
        )

    @contextmanager
    def open_clients(self, project_id: str) -> Iterator[PubSubClients]:
        self.state.opened.append(project_id)
        try:
            yield self.clients(project_id)
        finally:
            self.state.closed.append(project_id)


@pytest.fixture
def fake_pubsub() -> FakePubSub:
    return FakePubSub()


@pytest.fixture(autouse=True)
def _clean_project_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PUBSUB_PROJECTn and the emulator host from leaking in."""
    for name in list(os.environ):
        if name.startswith("PUBSUB_PROJECT") or name == "PUBSUB_EMULATOR_HOST":
            monkeypatch.delenv(name, raising=False)
