"""ResultReporter — lists what exists in a project after provisioning."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog
from google.api_core.exceptions import GoogleAPIError
from rich.console import Console

from pubsubc.clients import PubSubClients
from pubsubc.config.models import RunSettings
from pubsubc.errors import ListError
from pubsubc.naming import project_path, resource_id

logger = structlog.get_logger()


@dataclass
class SubscriptionReport:
    subscription_id: str
    push_endpoint: str = ""


@dataclass
class TopicReport:
    topic_id: str
    subscriptions: list[SubscriptionReport] = field(default_factory=list)


class ResultReporter:
    """Read-only view over the topics and subscriptions of a project."""

    def __init__(self, clients: PubSubClients, settings: RunSettings) -> None:
        self._clients = clients
        self._settings = settings

    def collect(self, project_id: str) -> list[TopicReport]:
        logger.debug(
            "pubsub.listing_project",
            project_id=project_id,
            emulator_host=self._settings.emulator_host,
        )
        reports: list[TopicReport] = []
        for full_topic in self._list_topics(project_id):
            report = TopicReport(topic_id=resource_id(full_topic))
            for full_sub in self._list_subscriptions(full_topic):
                report.subscriptions.append(
                    SubscriptionReport(
                        subscription_id=resource_id(full_sub),
                        push_endpoint=self._push_endpoint(full_sub),
                    )
                )
            reports.append(report)
        return reports

    def _list_topics(self, project_id: str) -> list[str]:
        try:
            return [
                topic.name
                for topic in self._clients.publisher.list_topics(
                    request={"project": project_path(project_id)}
                )
            ]
        except GoogleAPIError as exc:
            msg = f"Failed to list topics: {exc}"
            raise ListError(msg) from exc

    def _list_subscriptions(self, full_topic: str) -> list[str]:
        try:
            return list(
                self._clients.publisher.list_topic_subscriptions(
                    request={"topic": full_topic}
                )
            )
        except GoogleAPIError as exc:
            msg = f"Failed to list subscriptions: {exc}"
            raise ListError(msg) from exc

    def _push_endpoint(self, full_sub: str) -> str:
        try:
            sub = self._clients.subscriber.get_subscription(
                request={"subscription": full_sub}
            )
        except GoogleAPIError as exc:
            msg = f"Failed to get subscription config {exc}"
            raise ListError(msg) from exc
        return sub.push_config.push_endpoint


def render_report(reports: list[TopicReport], console: Console) -> None:
    """Print one ``Topic:`` line per topic and one line per subscription."""
    for report in reports:
        console.print(
            f"Topic: {report.topic_id}", markup=False, highlight=False, soft_wrap=True
        )
        for sub in report.subscriptions:
            console.print(
                f"  Subscription: {sub.subscription_id} - "
                f"Endpoint: {sub.push_endpoint}",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
            logger.debug("pubsub.subscription_listed", subscription=sub.subscription_id)
