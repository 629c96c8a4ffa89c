from sso.application.ports.token_issuer import TokenIssuer

__all__ = ["TokenIssuer"]
