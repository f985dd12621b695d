"""Abstract base class for cert-manager DNS-01 solvers."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any

from hetzner_webhook.models import ChallengeRequest


class Solver(ABC):
    """Interface a webhook host uses to route DNS-01 challenges to a provider."""

    @abstractmethod
    def name(self) -> str:
        """Solver name referenced from the Issuer's webhook config.

        Must be unique within a single webhook deployment's group.
        """

    @abstractmethod
    def present(self, challenge: ChallengeRequest) -> None:
        """Publish the challenge TXT record.

        Must tolerate being called more than once with the same challenge.
        """

    @abstractmethod
    def clean_up(self, challenge: ChallengeRequest) -> None:
        """Remove the TXT record holding this challenge's key, and only that record."""

    def initialize(self, client_config: Any = None, stop_event: threading.Event | None = None) -> None:
        """Called once when the webhook starts. Override to warm up clients."""
