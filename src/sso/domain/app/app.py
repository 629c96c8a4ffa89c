"""Client application record."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class App:
    """
    A client application that users log in to.

    Each app owns one RSA key pair. Tokens for the app are signed with
    ``private_key``; the app's relying parties verify them with
    ``public_key``. Both are PEM text, provisioned out of band.
    """

    id: int
    name: str
    private_key: str = field(repr=False)
    public_key: str = field(repr=False)
