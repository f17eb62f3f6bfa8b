"""Read-only verification of bare-metal cluster bring-up manifests."""

__version__ = "0.1.0"
