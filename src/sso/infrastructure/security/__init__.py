from sso.infrastructure.security.rs256_token_issuer import RS256TokenIssuer

__all__ = ["RS256TokenIssuer"]
