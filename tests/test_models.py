"""Tests for hetzner_webhook.models."""


def test_challenge_request_from_cert_manager_json():
    from hetzner_webhook.models import ChallengeRequest

    ch = ChallengeRequest.from_dict(
        {
            "uid": "6d4f",
            "action": "Present",
            "type": "dns-01",
            "dnsName": "example.com",
            "key": "abc123",
            "resourceNamespace": "default",
            "resolvedFQDN": "_acme-challenge.example.com.",
            "resolvedZone": "example.com.",
            "allowAmbientCredentials": False,
            "config": {"apiKeySecretRef": {"name": "hetzner-secret", "key": "api-key"}},
        }
    )
    assert ch.uid == "6d4f"
    assert ch.dns_name == "example.com"
    assert ch.resolved_fqdn == "_acme-challenge.example.com."
    assert ch.resolved_zone == "example.com."
    assert ch.resource_namespace == "default"
    assert ch.config == {"apiKeySecretRef": {"name": "hetzner-secret", "key": "api-key"}}


def test_challenge_request_optional_fields_default():
    from hetzner_webhook.models import ChallengeRequest

    ch = ChallengeRequest.from_dict(
        {"key": "abc123", "resolvedFQDN": "_acme-challenge.example.com.", "resolvedZone": "example.com."}
    )
    assert ch.config is None
    assert ch.action == ""
    assert ch.type == "dns-01"


def test_challenge_request_to_dict_roundtrip():
    from hetzner_webhook.models import ChallengeRequest

    ch = ChallengeRequest(
        key="abc123",
        resolved_fqdn="_acme-challenge.example.com.",
        resolved_zone="example.com.",
        dns_name="example.com",
        action="CleanUp",
        config={"apiKey": "tok"},
    )
    assert ChallengeRequest.from_dict(ch.to_dict()) == ch


def test_challenge_response_success_has_no_status():
    from hetzner_webhook.models import ChallengeResponse

    assert ChallengeResponse(uid="u1", success=True).to_dict() == {"uid": "u1", "success": True}


def test_challenge_response_failure_carries_message():
    from hetzner_webhook.models import ChallengeResponse

    d = ChallengeResponse(uid="u1", success=False, message="boom").to_dict()
    assert d["success"] is False
    assert d["status"]["message"] == "boom"
    assert d["status"]["status"] == "Failure"


def test_zone_from_dict_and_str():
    from hetzner_webhook.models import Zone

    zone = Zone.from_dict({"id": "42", "name": "example.com", "ttl": 86400})
    assert zone == Zone(id="42", name="example.com")
    assert str(zone) == "Zone 'example.com' (42)"


def test_record_to_dict_wire_shape():
    from hetzner_webhook.models import Record

    record = Record(name="_acme-challenge", type="TXT", value="abc123", zone_id="42")
    assert record.to_dict() == {
        "id": "",
        "name": "_acme-challenge",
        "ttl": 300,
        "type": "TXT",
        "value": "abc123",
        "zone_id": "42",
    }


def test_record_from_dict_without_ttl():
    from hetzner_webhook.models import Record

    record = Record.from_dict(
        {
            "id": "r1",
            "type": "TXT",
            "name": "_acme-challenge",
            "value": "abc123",
            "zone_id": "42",
            "created": "2024-01-01 00:00:00 +0000 UTC",
        }
    )
    assert record.id == "r1"
    assert record.ttl is None


def test_record_from_dict_defaults_missing_value_and_zone():
    from hetzner_webhook.models import Record

    record = Record.from_dict({"id": "r9", "name": "@", "type": "NS"})
    assert record.value == ""
    assert record.zone_id == ""
