"""Data classes exchanged with cert-manager and the Hetzner DNS API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

CHALLENGE_TTL = 300


@dataclass(frozen=True)
class ChallengeRequest:
    """A DNS-01 challenge as sent by cert-manager (``acme.cert-manager.io/v1alpha1``).

    Both ``resolved_zone`` and ``resolved_fqdn`` end with a dot, and the FQDN
    always has the zone as a suffix.
    """

    key: str
    resolved_fqdn: str
    resolved_zone: str
    dns_name: str = ""
    uid: str = ""
    action: str = ""
    type: str = "dns-01"
    resource_namespace: str = ""
    allow_ambient_credentials: bool = False
    config: Any = None

    def to_dict(self) -> dict:
        return {
            "uid": self.uid,
            "action": self.action,
            "type": self.type,
            "dnsName": self.dns_name,
            "key": self.key,
            "resourceNamespace": self.resource_namespace,
            "resolvedFQDN": self.resolved_fqdn,
            "resolvedZone": self.resolved_zone,
            "allowAmbientCredentials": self.allow_ambient_credentials,
            "config": self.config,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ChallengeRequest:
        return cls(
            key=data["key"],
            resolved_fqdn=data["resolvedFQDN"],
            resolved_zone=data["resolvedZone"],
            dns_name=data.get("dnsName", ""),
            uid=data.get("uid", ""),
            action=data.get("action", ""),
            type=data.get("type", "dns-01"),
            resource_namespace=data.get("resourceNamespace", ""),
            allow_ambient_credentials=bool(data.get("allowAmbientCredentials", False)),
            config=data.get("config"),
        )


@dataclass(frozen=True)
class ChallengeResponse:
    """Outcome of a challenge, rendered in cert-manager's response shape."""

    uid: str
    success: bool
    message: str | None = None

    def to_dict(self) -> dict:
        result: dict = {"uid": self.uid, "success": self.success}
        if not self.success:
            result["status"] = {
                "status": "Failure",
                "message": self.message or "",
                "reason": "InternalError",
                "code": 500,
            }
        return result


@dataclass(frozen=True)
class Zone:
    """A Hetzner DNS zone."""

    id: str
    name: str

    def __str__(self) -> str:
        return f"Zone '{self.name}' ({self.id})"

    @classmethod
    def from_dict(cls, data: dict) -> Zone:
        return cls(id=data["id"], name=data["name"])


@dataclass(frozen=True)
class Record:
    """A Hetzner DNS record. ``id`` stays empty until the API assigns one."""

    name: str
    type: str
    value: str
    zone_id: str
    ttl: int | None = CHALLENGE_TTL
    id: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "ttl": self.ttl,
            "type": self.type,
            "value": self.value,
            "zone_id": self.zone_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Record:
        return cls(
            id=data["id"],
            name=data["name"],
            type=data["type"],
            value=data.get("value", ""),
            zone_id=data.get("zone_id", ""),
            ttl=data.get("ttl"),
        )
