"""HTTP API for the shop catalog."""
