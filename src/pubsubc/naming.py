"""Pub/Sub resource path helpers."""

from __future__ import annotations


def project_path(project_id: str) -> str:
    return f"projects/{project_id}"


def topic_path(project_id: str, topic_id: str) -> str:
    """Build a fully-qualified Pub/Sub topic name."""
    return f"projects/{project_id}/topics/{topic_id}"


def subscription_path(project_id: str, subscription_id: str) -> str:
    """Build a fully-qualified Pub/Sub subscription name."""
    return f"projects/{project_id}/subscriptions/{subscription_id}"


def resource_id(path: str) -> str:
    """Extract the short id from a ``projects/{project}/{kind}/{id}`` path."""
    return path.rsplit("/", 1)[-1]
