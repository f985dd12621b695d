"""Hetzner DNS-01 solver — present and clean up challenge TXT records."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from hetzner_webhook.config import load_solver_config
from hetzner_webhook.dns.base import Solver
from hetzner_webhook.dns.hetzner import API_BASE, HetznerDnsClient
from hetzner_webhook.dns.util import split_domain
from hetzner_webhook.errors import CleanUpError, ConfigError, DecodeError, PresentError, TransportError
from hetzner_webhook.models import CHALLENGE_TTL, ChallengeRequest, Record

logger = logging.getLogger(__name__)

SOLVER_NAME = "hetzner"

SecretResolver = Callable[[str, str, str], str]


class HetznerSolver(Solver):
    """Solver that writes challenge records through the Hetzner DNS API.

    Holds no per-challenge state: each call resolves its own API key and opens
    its own HTTP client, so concurrent calls do not interfere.
    """

    def __init__(
        self,
        resolve_secret: SecretResolver | None = None,
        namespace: str | None = None,
        api_base_url: str = API_BASE,
        http_timeout: float = 30,
        log: logging.Logger | None = None,
        _client_factory: Callable[[str], HetznerDnsClient] | None = None,
    ) -> None:
        self._resolve_secret = resolve_secret
        self._namespace = namespace
        self._log = log or logger
        self._client_factory = _client_factory or (
            lambda api_key: HetznerDnsClient(api_key, base_url=api_base_url, timeout=http_timeout)
        )

    def name(self) -> str:
        return SOLVER_NAME

    def initialize(self, client_config: Any = None, stop_event: threading.Event | None = None) -> None:
        self._log.debug("Initialized %s solver", SOLVER_NAME)

    def _api_key(self, challenge: ChallengeRequest) -> str:
        """Resolve the API token from the challenge's solver config."""
        cfg = load_solver_config(challenge.config)
        if challenge.config is None:
            return cfg.api_key
        if cfg.api_key:
            self._log.info(
                "Inline apiKey is deprecated, please migrate to an apiKeySecretRef based solver configuration"
            )
            return cfg.api_key

        ref = cfg.api_key_secret_ref
        if ref is None:
            raise ConfigError("solver config has neither 'apiKey' nor 'apiKeySecretRef'")
        if self._resolve_secret is None:
            raise ConfigError(f"No secret resolver configured to read secret '{ref.name}'")
        namespace = self._namespace or challenge.resource_namespace
        return self._resolve_secret(namespace, ref.name, ref.key)

    def present(self, challenge: ChallengeRequest) -> None:
        api_key = self._api_key(challenge)
        self._log.info(
            "Presenting DNS challenge for %s (namespace %s)", challenge.dns_name, challenge.resource_namespace
        )
        label, apex = split_domain(challenge.resolved_fqdn, challenge.resolved_zone)

        with self._client_factory(api_key) as client:
            zone_id = client.get_zone_id(apex)
            record = Record(name=label, type="TXT", value=challenge.key, zone_id=zone_id, ttl=CHALLENGE_TTL)
            try:
                resp = client.create_record(record)
            except TransportError as exc:
                self._log.error("Unable to create TXT record %s in zone %s: %s", label, apex, exc)
                raise PresentError(f"Unable to create TXT record '{label}' in zone '{apex}'") from exc

        # Duplicate creates from retried challenges are rejected by the API; that must not fail present.
        if resp.is_success:
            self._log.info("Created TXT record %s in zone %s", label, apex)
        else:
            self._log.warning(
                "Hetzner did not accept TXT record %s in zone %s: %s %s",
                label,
                apex,
                resp.status_code,
                resp.text,
            )

    def clean_up(self, challenge: ChallengeRequest) -> None:
        api_key = self._api_key(challenge)
        self._log.info(
            "Cleaning up DNS challenge for %s (namespace %s)", challenge.dns_name, challenge.resource_namespace
        )
        label, apex = split_domain(challenge.resolved_fqdn, challenge.resolved_zone)

        with self._client_factory(api_key) as client:
            zone_id = client.get_zone_id(apex)
            try:
                records = client.list_records(zone_id)
            except (TransportError, DecodeError) as exc:
                raise CleanUpError(f"Cannot fetch DNS records of zone '{apex}': {exc}") from exc

            deleted = 0
            for record in records:
                if record.type != "TXT" or record.name != label or record.value != challenge.key:
                    continue
                try:
                    resp = client.delete_record(record.id)
                except TransportError as exc:
                    self._log.error("Cannot delete TXT record %s (%s): %s", record.name, record.id, exc)
                    continue
                if not resp.is_success:
                    self._log.error(
                        "Hetzner refused to delete TXT record %s (%s): %s %s",
                        record.name,
                        record.id,
                        resp.status_code,
                        resp.text,
                    )
                    continue
                deleted += 1
                self._log.info("Deleted TXT record %s (%s) from zone %s", record.name, record.id, apex)

        if deleted == 0:
            self._log.info("No TXT record %s with the challenge key left in zone %s", label, apex)
