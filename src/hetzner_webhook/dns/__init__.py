"""Hetzner DNS API access and the solver interface it backs."""

from __future__ import annotations

from hetzner_webhook.dns.base import Solver
from hetzner_webhook.dns.hetzner import API_BASE, HetznerDnsClient
from hetzner_webhook.dns.util import split_domain

__all__ = ["API_BASE", "HetznerDnsClient", "Solver", "split_domain"]
