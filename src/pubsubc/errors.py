"""Exception hierarchy for provisioning runs."""

from __future__ import annotations


class PubSubcError(Exception):
    """Base class for every error that terminates a provisioning run."""


class ConfigError(PubSubcError):
    """A PUBSUB_PROJECTn variable could not be parsed."""


class ConnectError(PubSubcError):
    """The Pub/Sub admin clients could not be created for a project."""


class CreateError(PubSubcError):
    """The service rejected a topic or subscription creation request."""


class ListError(PubSubcError):
    """Listing topics/subscriptions or fetching a subscription config failed."""
