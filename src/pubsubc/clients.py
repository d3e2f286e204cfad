"""Scoped Pub/Sub admin clients for one project."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from typing import Any

import structlog
from google.cloud import pubsub_v1

from pubsubc.errors import ConnectError

logger = structlog.get_logger()


@dataclass(frozen=True)
class PubSubClients:
    """Publisher (topic admin) and subscriber (subscription admin) pair."""

    project_id: str
    publisher: Any
    subscriber: Any


@contextmanager
def open_clients(project_id: str) -> Iterator[PubSubClients]:
    """Connect to Pub/Sub for *project_id*; both clients close on exit.

    Honours ``PUBSUB_EMULATOR_HOST`` through the client library.
    """
    with ExitStack() as stack:
        try:
            publisher = stack.enter_context(pubsub_v1.PublisherClient())
            subscriber = stack.enter_context(pubsub_v1.SubscriberClient())
        except Exception as exc:
            msg = f"Unable to create client to project {project_id!r}: {exc}"
            raise ConnectError(msg) from exc

        logger.debug("pubsub.client_connected", project_id=project_id)
        yield PubSubClients(
            project_id=project_id, publisher=publisher, subscriber=subscriber
        )
