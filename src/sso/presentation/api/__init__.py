"""HTTP API for the SSO service."""
