"""Configuration loading: process settings from the environment, solver settings per challenge."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from hetzner_webhook.dns.hetzner import API_BASE
from hetzner_webhook.errors import ConfigError

SERVICE_ACCOUNT_NAMESPACE_FILE = "/run/secrets/kubernetes.io/serviceaccount/namespace"
_DEFAULT_HTTP_TIMEOUT = 30.0
_DEFAULT_LISTEN_PORT = 443


@dataclass(frozen=True)
class AppConfig:
    """Webhook process configuration loaded from environment variables."""

    group_name: str
    api_base_url: str = API_BASE
    http_timeout: float = _DEFAULT_HTTP_TIMEOUT
    namespace_file: str = SERVICE_ACCOUNT_NAMESPACE_FILE
    listen_host: str = "0.0.0.0"
    listen_port: int = _DEFAULT_LISTEN_PORT
    tls_cert_file: str | None = None
    tls_key_file: str | None = None
    log_level: str = "INFO"


def _require_env(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise ValueError(f"Required environment variable {name} is not set")
    return value


def load_config() -> AppConfig:
    """Load and validate webhook configuration from environment variables."""
    group_name = _require_env("GROUP_NAME")
    api_base_url = os.environ.get("HETZNER_API_URL", API_BASE)

    raw_timeout = os.environ.get("HTTP_TIMEOUT_SECONDS", str(_DEFAULT_HTTP_TIMEOUT))
    try:
        http_timeout = float(raw_timeout)
    except ValueError:
        raise ValueError(f"HTTP_TIMEOUT_SECONDS must be a number, got: {raw_timeout!r}")
    if http_timeout <= 0:
        raise ValueError(f"HTTP_TIMEOUT_SECONDS must be positive, got: {http_timeout}")

    raw_port = os.environ.get("LISTEN_PORT", str(_DEFAULT_LISTEN_PORT))
    try:
        listen_port = int(raw_port)
    except ValueError:
        raise ValueError(f"LISTEN_PORT must be an integer, got: {raw_port!r}")
    if not 0 < listen_port < 65536:
        raise ValueError(f"LISTEN_PORT must be between 1 and 65535, got: {listen_port}")

    return AppConfig(
        group_name=group_name,
        api_base_url=api_base_url,
        http_timeout=http_timeout,
        namespace_file=os.environ.get("NAMESPACE_FILE", SERVICE_ACCOUNT_NAMESPACE_FILE),
        listen_host=os.environ.get("LISTEN_HOST", "0.0.0.0"),
        listen_port=listen_port,
        tls_cert_file=os.environ.get("TLS_CERT_FILE") or None,
        tls_key_file=os.environ.get("TLS_KEY_FILE") or None,
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )


@dataclass(frozen=True)
class SecretRef:
    """Reference to one key of a Secret in the webhook's namespace."""

    name: str
    key: str


@dataclass(frozen=True)
class SolverConfig:
    """Per-issuer solver configuration (``issuer.spec.acme.dns01.webhook.config``).

    ``api_key`` is the deprecated inline form; ``api_key_secret_ref`` points at
    a Secret holding the token.
    """

    api_key: str = ""
    api_key_secret_ref: SecretRef | None = None


def _string_field(data: dict, name: str) -> str:
    value = data.get(name, "")
    if not isinstance(value, str):
        raise ConfigError(f"error decoding solver config: '{name}' must be a string, got {type(value).__name__}")
    return value


def load_solver_config(raw: Any) -> SolverConfig:
    """Decode the opaque config blob attached to a challenge.

    A missing blob yields an empty config: the API key is then empty and the
    Hetzner API rejects the requests.
    """
    if raw is None:
        return SolverConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"error decoding solver config: expected an object, got {type(raw).__name__}")

    secret_ref = None
    raw_ref = raw.get("apiKeySecretRef")
    if raw_ref is not None:
        if not isinstance(raw_ref, dict):
            raise ConfigError("error decoding solver config: 'apiKeySecretRef' must be an object")
        secret_ref = SecretRef(name=_string_field(raw_ref, "name"), key=_string_field(raw_ref, "key"))

    return SolverConfig(api_key=_string_field(raw, "apiKey"), api_key_secret_ref=secret_ref)
