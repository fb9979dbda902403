"""ambit - Tailscale subnet routers on Fly.io private networks."""

__version__ = "0.1.0"
