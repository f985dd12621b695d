"""DNS utility functions."""

from __future__ import annotations


def split_domain(resolved_fqdn: str, resolved_zone: str) -> tuple[str, str]:
    """Split a resolved FQDN into (label, apex) relative to its resolved zone.

    Both inputs are dot-terminated as cert-manager hands them over. The apex
    is the zone without its trailing dot; the label is the FQDN with the zone
    suffix and then one trailing dot removed.

    No suffix check is made: if the zone is not a suffix of the FQDN the label
    is simply the whole FQDN without its trailing dot.

    Args:
        resolved_fqdn: Record name (e.g. "_acme-challenge.example.com.").
        resolved_zone: Zone name (e.g. "example.com.").

    Returns:
        Tuple of (label, apex), e.g. ("_acme-challenge", "example.com").
    """
    label = resolved_fqdn.removesuffix(resolved_zone).removesuffix(".")
    apex = resolved_zone.removesuffix(".")
    return label, apex
