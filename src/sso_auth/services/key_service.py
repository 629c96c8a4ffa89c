"""RSA key pair generation and strict PEM parsing.

Keys are generated once per app by provisioning tooling and parsed on
every token issuance, so the parser only accepts exactly the envelope
the generator produces: a single PEM block with nothing but whitespace
around it.
"""

import re

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from sso_auth.exceptions import MalformedKeyError
from sso_auth.schemas import KeyPair

_PEM_BLOCK = re.compile(
    r"\A\s*(-----BEGIN (?P<label>[A-Z0-9 ]+)-----\r?\n"
    r"(?P<body>[^-]+?)\r?\n"
    r"-----END (?P=label)-----)\s*\Z",
)


class KeyService:
    """Service for generating and parsing PEM-encoded RSA keys.

    Examples
    --------
    >>> keys = KeyService.generate_key_pair(2048)
    >>> private_key = KeyService.parse_private_key(keys.private_key)
    >>> private_key.key_size
    2048
    """

    PUBLIC_EXPONENT = 65537
    MIN_KEY_BITS = 2048

    @classmethod
    def generate_key_pair(cls, bits: int = MIN_KEY_BITS) -> KeyPair:
        """Generate a new RSA key pair.

        Parameters
        ----------
        bits
            RSA modulus size (2048 or 4096 recommended)

        Returns
        -------
        KeyPair with the private key as PKCS#1 PEM and the public key
        as SubjectPublicKeyInfo PEM
        """
        if bits < cls.MIN_KEY_BITS:
            msg = f"RSA key size must be at least {cls.MIN_KEY_BITS} bits, got {bits}"
            raise ValueError(msg)

        private_key = rsa.generate_private_key(
            public_exponent=cls.PUBLIC_EXPONENT,
            key_size=bits,
        )

        private_pem = private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )
        public_pem = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )

        return KeyPair(
            private_key=private_pem.decode("ascii"),
            public_key=public_pem.decode("ascii"),
        )

    @staticmethod
    def parse_private_key(pem: str) -> rsa.RSAPrivateKey:
        """Parse a PEM-encoded RSA private key.

        Raises
        ------
        MalformedKeyError
            If the text is not exactly one PEM block or is not an RSA key
        """
        block = _single_pem_block(pem, "private")
        try:
            key = serialization.load_pem_private_key(block, password=None)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            msg = f"failed to parse private key: {e}"
            raise MalformedKeyError(msg) from e

        if not isinstance(key, rsa.RSAPrivateKey):
            msg = "not an RSA private key"
            raise MalformedKeyError(msg)

        return key

    @staticmethod
    def parse_public_key(pem: str) -> rsa.RSAPublicKey:
        """Parse a PEM-encoded RSA public key.

        Raises
        ------
        MalformedKeyError
            If the text is not exactly one PEM block or is not an RSA key
        """
        block = _single_pem_block(pem, "public")
        try:
            key = serialization.load_pem_public_key(block)
        except (ValueError, UnsupportedAlgorithm) as e:
            msg = f"failed to parse public key: {e}"
            raise MalformedKeyError(msg) from e

        if not isinstance(key, rsa.RSAPublicKey):
            msg = "not an RSA public key"
            raise MalformedKeyError(msg)

        return key


def _single_pem_block(pem: str, kind: str) -> bytes:
    if not isinstance(pem, str) or not pem.strip():
        msg = f"failed to parse PEM block containing the {kind} key"
        raise MalformedKeyError(msg)

    match = _PEM_BLOCK.match(pem)
    if match is None:
        if pem.count("-----BEGIN ") > 1:
            msg = "unexpected data after PEM block"
        else:
            msg = f"failed to parse PEM block containing the {kind} key"
        raise MalformedKeyError(msg)

    try:
        return (match.group(1) + "\n").encode("ascii")
    except UnicodeEncodeError as e:
        msg = f"failed to parse PEM block containing the {kind} key"
        raise MalformedKeyError(msg) from e
