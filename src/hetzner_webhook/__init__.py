"""cert-manager DNS-01 webhook solver for Hetzner DNS."""
