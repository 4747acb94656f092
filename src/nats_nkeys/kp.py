import logging
import secrets
import typing as t

import typing_extensions as t_

from . import algorithms, constants, encoding, errors

logger = logging.getLogger("nats_nkeys")

RandomSource = t.Callable[[int], bytes]
AccessType = t_.Literal["account", "cluster", "operator", "server", "user"]


def _read_random(rand: t.Optional[RandomSource], size: int) -> bytes:
    """Read exactly size bytes from a random source"""
    source = rand or secrets.token_bytes
    try:
        data = source(size)
    except OSError as exc:
        raise errors.RandomSourceError() from exc
    if not isinstance(data, (bytes, bytearray)) or len(data) != size:
        raise errors.RandomSourceError()
    return bytes(data)


def _signing_prefix(prefix: t.Union[int, str]) -> int:
    """Resolve an access type or a prefix byte into a signing prefix byte"""
    if isinstance(prefix, str):
        try:
            return constants.SIGNING_PREFIXES[prefix]
        except KeyError:
            allowed = ", ".join(repr(name) for name in constants.SIGNING_PREFIXES)
            raise TypeError(
                f"Invalid prefix: {prefix}. Allowed values: {allowed}"
            ) from None
    if prefix not in constants.SIGNING_PREFIXES.values():
        raise errors.InvalidPrefixByteError()
    return prefix


class BaseKeyPair:
    """Behaviour shared by all keypairs: a typed public key able to verify signatures."""

    def __init__(self, prefix: int, public_bytes: bytes) -> None:
        self._prefix = prefix
        self._public_bytes = public_bytes

    @property
    def prefix(self) -> int:
        """The public prefix byte of the keypair"""
        return self._prefix

    @property
    def public_key(self) -> str:
        """
        Return the NATS encoded public key associated with the KeyPair.

        Returns:
            public key associated with the key pair
        """
        return encoding.encode(self._prefix, self._public_bytes)

    @property
    def private_key(self) -> str:
        raise errors.PublicKeyOnlyError()

    @property
    def seed(self) -> str:
        raise errors.PublicKeyOnlyError()

    def sign(self, data: bytes) -> bytes:
        raise errors.CannotSignError()

    def verify(self, data: bytes, signature: bytes) -> t_.Literal[True]:
        """Verify some data and signature.

        Arguments:
            data: The payload in bytes that was signed.
            signature: The signature in bytes that will be verified.

        Returns:
            True when signature is valid, else InvalidSignatureError is raised.
        """
        if not algorithms.verify(self._public_bytes, data, signature):
            raise errors.InvalidSignatureError()
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(public_key={self.public_key!r})"


class KeyPair(BaseKeyPair):
    def __init__(self, prefix: int, raw_seed: t.Union[bytes, bytearray]) -> None:
        """
        NKEYS KeyPair used to sign and verify data.

        Arguments:
            prefix: The public prefix of the nkey.
            raw_seed: The 64 bytes seed material of the nkey. Only the first 32 bytes
                are used to derive the ed25519 signing key.

        Returns:
            A KeyPair that can be used to sign and verify data.
        """
        prefix = _signing_prefix(prefix)
        if len(raw_seed) != constants.SEED_SIZE:
            raise errors.InvalidSeedLengthError()
        raw_seed = bytes(raw_seed)
        public_bytes, private_bytes = algorithms.generate_keypair(
            raw_seed[: constants.ED25519_SEED_SIZE]
        )
        super().__init__(prefix, public_bytes)
        self._raw_seed = raw_seed
        self._private_bytes = private_bytes

    @property
    def private_key(self) -> str:
        """
        Return the NATS encoded private key associated with the KeyPair.

        Returns:
            private key associated with the key pair
        """
        return encoding.encode(constants.PREFIX_BYTE_PRIVATE, self._private_bytes)

    @property
    def seed(self) -> str:
        """Return the NATS encoded seed associated with the KeyPair"""
        return encoding.encode_seed(self._prefix, self._raw_seed)

    def sign(self, data: bytes) -> bytes:
        """Sign some data using the ed25519 private key

        Arguments:
            data: The payload in bytes to sign.

        Returns:
            The raw bytes representing the signed data.
        """
        return algorithms.sign(self._private_bytes, data)

    @classmethod
    def from_seed(cls, seed: t.Union[str, bytes, bytearray]) -> "KeyPair":
        """Load a keypair from encoded seed."""
        public_prefix, raw_seed = encoding.decode_seed(seed)
        return cls(prefix=public_prefix, raw_seed=raw_seed)

    @classmethod
    def create(
        cls,
        prefix: t.Union[AccessType, int],
        rand: t.Optional[RandomSource] = None,
    ) -> "KeyPair":
        """Create an NATS nkeys keypair. Keypairs must be issued for a specific access type, one of:
        - account
        - cluster
        - operator
        - server
        - user

        Arguments:
            prefix: access type, or the matching prefix byte
            rand: optional callable returning the requested number of random bytes

        Returns:
            A KeyPair instance.
        """
        public_prefix = _signing_prefix(prefix)
        seed = _read_random(rand, constants.ED25519_SEED_SIZE)
        _, private_bytes = algorithms.generate_keypair(seed)
        keypair = cls(prefix=public_prefix, raw_seed=private_bytes)
        logger.debug(f"Created keypair {keypair.public_key}")
        return keypair


class PublicKeyPair(BaseKeyPair):
    """Keypair holding only a public key. It can verify signatures but never sign."""

    @classmethod
    def from_public_key(
        cls,
        public_key: t.Union[str, bytes, bytearray],
        prefix: t.Optional[int] = None,
    ) -> "PublicKeyPair":
        """Load a public keypair from encoded public key.

        Arguments:
            public_key: the encoded public key.
            prefix: the expected prefix byte. When omitted, any signing prefix is accepted.

        Returns:
            A PublicKeyPair instance.
        """
        if prefix is None:
            prefix = encoding.prefix_of(public_key)
        prefix = _signing_prefix(prefix)
        public_bytes = encoding.decode(prefix, public_key)
        if len(public_bytes) != constants.PUBLIC_KEY_SIZE:
            raise errors.InvalidPublicKeyError()
        return cls(prefix, public_bytes)
