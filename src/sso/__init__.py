"""SSO - single-sign-on credential service."""
