"""Provision Pub/Sub topics and subscriptions from environment variables."""
