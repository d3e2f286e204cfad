"""PubSubProvisioner — creates the topics and subscriptions of a project."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import structlog
from google.api_core.exceptions import GoogleAPIError

from pubsubc.clients import PubSubClients
from pubsubc.config.models import ProjectSpec, RunSettings, SubscriptionSpec
from pubsubc.errors import CreateError
from pubsubc.naming import subscription_path, topic_path

logger = structlog.get_logger()


@dataclass
class ProvisionResult:
    topics: list[str] = field(default_factory=list)
    subscriptions: list[str] = field(default_factory=list)


class PubSubProvisioner:
    """Creates topics and push/pull subscriptions one at a time.

    Existing resources are not tolerated: ``AlreadyExists`` surfaces as a
    CreateError like any other rejection.  Nothing created before a failure
    is rolled back.
    """

    def __init__(self, clients: PubSubClients, settings: RunSettings) -> None:
        self._clients = clients
        self._settings = settings

    def provision(self, spec: ProjectSpec) -> ProvisionResult:
        project_id = spec.project_id
        result = ProvisionResult()

        logger.debug(
            "pubsub.provision_started",
            project_id=project_id,
            emulator_host=self._settings.emulator_host,
        )

        for topic_id in spec.topics:
            full_topic = self._create_topic(project_id, topic_id)
            result.topics.append(full_topic)

            for sub in spec.subscriptions(topic_id):
                result.subscriptions.append(
                    self._create_subscription(project_id, topic_id, full_topic, sub)
                )

        return result

    def _create_topic(self, project_id: str, topic_id: str) -> str:
        full_topic = topic_path(project_id, topic_id)
        logger.debug("pubsub.creating_topic", topic=topic_id)
        try:
            self._clients.publisher.create_topic(request={"name": full_topic})
        except GoogleAPIError as exc:
            msg = (
                f"Unable to create topic {topic_id!r} "
                f"for project {project_id!r}: {exc}"
            )
            raise CreateError(msg) from exc
        logger.info("pubsub.topic_created", topic=full_topic)
        return full_topic

    def _create_subscription(
        self,
        project_id: str,
        topic_id: str,
        full_topic: str,
        sub: SubscriptionSpec,
    ) -> str:
        sub_name = subscription_path(project_id, sub.subscription_id)
        request: dict[str, Any] = {"name": sub_name, "topic": full_topic}

        if sub.push_url is not None:
            request["push_config"] = {"push_endpoint": sub.push_url}
            logger.debug(
                "pubsub.creating_subscription",
                subscription=sub.subscription_id,
                endpoint=sub.push_url,
            )
        else:
            logger.debug(
                "pubsub.creating_subscription", subscription=sub.subscription_id
            )

        try:
            self._clients.subscriber.create_subscription(request=request)
        except GoogleAPIError as exc:
            if sub.is_push:
                msg = (
                    f"Unable to create push subscription {sub.subscription_id!r} "
                    f"on topic {topic_id!r} for project {project_id!r} "
                    f"using push endpoint {sub.push_endpoint!r}: {exc}"
                )
            else:
                msg = (
                    f"Unable to create subscription {sub.subscription_id!r} "
                    f"on topic {topic_id!r} for project {project_id!r}: {exc}"
                )
            raise CreateError(msg) from exc

        logger.info("pubsub.subscription_created", subscription=sub_name)
        return sub_name
