"""Shared test fixtures for cert-manager-webhook-hetzner."""

import pytest

from hetzner_webhook.models import ChallengeRequest


def _make_challenge(**overrides) -> ChallengeRequest:
    defaults = {
        "uid": "uid-1",
        "action": "Present",
        "dns_name": "example.com",
        "key": "abc123",
        "resource_namespace": "default",
        "resolved_fqdn": "_acme-challenge.example.com.",
        "resolved_zone": "example.com.",
        "config": {"apiKey": "tok"},
    }
    defaults.update(overrides)
    return ChallengeRequest(**defaults)


@pytest.fixture
def make_challenge():
    """Factory for ChallengeRequest objects with sensible defaults."""
    return _make_challenge
