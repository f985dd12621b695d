"""Tests for DNS utility functions."""

from hetzner_webhook.dns.util import split_domain


class TestSplitDomain:
    def test_base_domain(self):
        label, apex = split_domain("_acme-challenge.example.com.", "example.com.")
        assert label == "_acme-challenge"
        assert apex == "example.com"

    def test_subdomain_in_parent_zone(self):
        label, apex = split_domain("_acme-challenge.sub.example.com.", "example.com.")
        assert label == "_acme-challenge.sub"
        assert apex == "example.com"

    def test_deep_subdomain(self):
        label, apex = split_domain("_acme-challenge.a.b.example.com.", "b.example.com.")
        assert label == "_acme-challenge.a"
        assert apex == "b.example.com"

    def test_fqdn_equal_to_zone_gives_empty_label(self):
        label, apex = split_domain("example.com.", "example.com.")
        assert label == ""
        assert apex == "example.com"

    def test_zone_not_a_suffix_keeps_full_fqdn(self):
        label, apex = split_domain("_acme-challenge.other.org.", "example.com.")
        assert label == "_acme-challenge.other.org"
        assert apex == "example.com"

    def test_only_one_trailing_dot_removed(self):
        label, apex = split_domain("_acme-challenge.example.com.", "example.com..")
        assert label == "_acme-challenge.example.com"
        assert apex == "example.com."

    def test_label_plus_zone_property(self):
        for zone in ("example.com.", "a.example.co.uk.", "x."):
            for label in ("_acme-challenge", "_acme-challenge.www", "a.b.c"):
                assert split_domain(f"{label}.{zone}", zone) == (label, zone[:-1])
