"""Parsing of the ``PUBSUB_PROJECTn`` environment variable format.

A variable looks like::

    project,topic1,topic2:sub1,topic3:sub2+host|port

The first comma-separated field is the project id, every other field is a
topic followed by zero or more ``:``-separated subscription tokens.  A
token carrying a ``+host|port`` suffix declares a push subscription.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from pubsubc.config.models import DEFAULT_ENV_PREFIX, ProjectSpec, SubscriptionSpec
from pubsubc.errors import ConfigError


def project_env_name(index: int, prefix: str = DEFAULT_ENV_PREFIX) -> str:
    return f"{prefix}{index}"


def iter_project_envs(
    environ: Mapping[str, str], prefix: str = DEFAULT_ENV_PREFIX
) -> Iterator[tuple[str, str]]:
    """Yield ``(name, value)`` for PREFIX1, PREFIX2, ... up to the first gap.

    An empty value counts as unset.
    """
    index = 1
    while True:
        name = project_env_name(index, prefix)
        value = environ.get(name, "")
        if not value:
            return
        yield name, value
        index += 1


def decode_subscription(token: str) -> SubscriptionSpec:
    """Split ``name[+host|port]`` into a subscription id and push endpoint."""
    parts = token.split("+")
    subscription_id = parts[0].strip()
    push_endpoint = ""
    if len(parts) > 1:
        push_endpoint = parts[1].strip().replace("|", ":", 1)
    return SubscriptionSpec(
        subscription_id=subscription_id, push_endpoint=push_endpoint
    )


def parse_project(value: str, *, source: str = DEFAULT_ENV_PREFIX) -> ProjectSpec:
    """Parse one variable value into a ProjectSpec.

    *source* names the variable in error messages.  A topic listed more
    than once collects the subscriptions of every occurrence.
    """
    parts = value.split(",")
    if len(parts) < 2:
        msg = f"{source}: Expected at least 1 topic to be defined"
        raise ConfigError(msg)

    topics: dict[str, list[str]] = {}
    for part in parts[1:]:
        topic_id, *subscriptions = part.split(":")
        topics.setdefault(topic_id, []).extend(subscriptions)

    return ProjectSpec(project_id=parts[0], topics=topics)
