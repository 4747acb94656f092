"""Ed25519 signature primitive used by nkeys keypairs.

Private keys are handled in their 64 bytes form: the 32 bytes ed25519 seed
followed by the 32 bytes public key.
"""
import typing as t

import cryptography.exceptions
from cryptography.hazmat.primitives.asymmetric import ed25519
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from . import constants, errors


def encode_ed25519_public_key(key: ed25519.Ed25519PublicKey) -> bytes:
    """Encode an ed25519 public key into bytes"""
    return key.public_bytes(encoding=Encoding.Raw, format=PublicFormat.Raw)


def load_signing_key(private_bytes: bytes) -> ed25519.Ed25519PrivateKey:
    """Load an ed25519 signing key from a 32 bytes seed or a 64 bytes private key"""
    if len(private_bytes) not in (
        constants.ED25519_SEED_SIZE,
        constants.PRIVATE_KEY_SIZE,
    ):
        raise errors.InvalidSeedLengthError()
    return ed25519.Ed25519PrivateKey.from_private_bytes(
        bytes(private_bytes[: constants.ED25519_SEED_SIZE])
    )


def generate_keypair(seed: bytes) -> t.Tuple[bytes, bytes]:
    """Derive an ed25519 keypair from a 32 bytes seed.

    Returns:
        A tuple (public_bytes, private_bytes) where private bytes are seed + public bytes.
    """
    if len(seed) != constants.ED25519_SEED_SIZE:
        raise errors.InvalidSeedLengthError()
    key = ed25519.Ed25519PrivateKey.from_private_bytes(bytes(seed))
    public_bytes = encode_ed25519_public_key(key.public_key())
    return public_bytes, bytes(seed) + public_bytes


def sign(private_bytes: bytes, message: bytes) -> bytes:
    """Sign a message using a 64 bytes private key"""
    return load_signing_key(private_bytes).sign(message)


def verify(public_bytes: bytes, message: bytes, signature: bytes) -> bool:
    """Return True when signature is valid for the message and the public key"""
    if len(public_bytes) != constants.PUBLIC_KEY_SIZE:
        raise errors.InvalidPublicKeyError()
    key = ed25519.Ed25519PublicKey.from_public_bytes(bytes(public_bytes))
    try:
        key.verify(bytes(signature), message)
    except cryptography.exceptions.InvalidSignature:
        return False
    return True
