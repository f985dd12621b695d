"""Exception hierarchy raised by the solver and the Hetzner API client."""

from __future__ import annotations


class WebhookError(Exception):
    """Base class for every error a challenge can fail with."""


class ConfigError(WebhookError):
    """Solver configuration is malformed or its credentials cannot be resolved."""


class SecretNotFound(ConfigError):
    """Referenced secret, or the key inside it, does not exist."""

    def __init__(self, namespace: str, name: str, key: str | None = None) -> None:
        self.namespace = namespace
        self.name = name
        self.key = key
        if key is None:
            message = f"Secret '{namespace}/{name}' not found"
        else:
            message = f"Key '{key}' not found in secret '{namespace}/{name}'"
        super().__init__(message)


class ZoneLookupError(WebhookError):
    """Common base for failures talking to the Hetzner DNS API."""


class TransportError(ZoneLookupError):
    """The request could not be sent or the connection failed."""


class UnexpectedStatus(ZoneLookupError):
    """The API answered with a status other than the one required."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"did not get expected HTTP 200 but {status_code} {reason}".rstrip())


class DecodeError(ZoneLookupError):
    """The response body is not the JSON shape the API documents."""


class AmbiguousZone(ZoneLookupError):
    """A zone query by exact name did not return exactly one zone."""

    def __init__(self, apex: str, zones: list) -> None:
        self.apex = apex
        self.zones = zones
        listed = ", ".join(str(z) for z in zones)
        super().__init__(f"domain '{apex}' did not yield exactly 1 zone result but {len(zones)}: {listed}")


class PresentError(WebhookError):
    """Creating the challenge TXT record failed."""


class CleanUpError(WebhookError):
    """Listing the zone's records for clean-up failed."""
