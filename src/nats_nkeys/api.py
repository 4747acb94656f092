import typing as t

import typing_extensions as t_

from . import constants, errors, kp


def sign(seed: t.Union[str, bytes, bytearray], data: bytes) -> bytes:
    """Sign some data using an encoded seed"""
    if not seed:
        raise errors.InvalidSeedError()
    return kp.KeyPair.from_seed(seed).sign(data)


def verify(
    public_key: t.Union[str, bytes, bytearray], signature: bytes, data: bytes
) -> t_.Literal[True]:
    """Verify a signature using an encoded public key"""
    if not public_key:
        raise errors.InvalidPublicKeyError()
    return kp.PublicKeyPair.from_public_key(public_key).verify(data, signature)


def create_keypair(
    prefix: t.Union[kp.AccessType, int], rand: t.Optional[kp.RandomSource] = None
) -> kp.KeyPair:
    """Create a new keypair"""
    return kp.KeyPair.create(prefix=prefix, rand=rand)


def create_account(rand: t.Optional[kp.RandomSource] = None) -> kp.KeyPair:
    """Create a new account keypair"""
    return kp.KeyPair.create(constants.PREFIX_BYTE_ACCOUNT, rand=rand)


def create_user(rand: t.Optional[kp.RandomSource] = None) -> kp.KeyPair:
    """Create a new user keypair"""
    return kp.KeyPair.create(constants.PREFIX_BYTE_USER, rand=rand)


def create_cluster(rand: t.Optional[kp.RandomSource] = None) -> kp.KeyPair:
    """Create a new cluster keypair"""
    return kp.KeyPair.create(constants.PREFIX_BYTE_CLUSTER, rand=rand)


def create_server(rand: t.Optional[kp.RandomSource] = None) -> kp.KeyPair:
    """Create a new server keypair"""
    return kp.KeyPair.create(constants.PREFIX_BYTE_SERVER, rand=rand)


def create_operator(rand: t.Optional[kp.RandomSource] = None) -> kp.KeyPair:
    """Create a new operator keypair"""
    return kp.KeyPair.create(constants.PREFIX_BYTE_OPERATOR, rand=rand)


def from_seed(seed: t.Union[str, bytes, bytearray]) -> kp.KeyPair:
    """Load a new keypair from seed.

    An ED25519 public key or private key is not sufficient to generate a KeyPair, because
    it does not include the access type (operator, account, user, cluster or server).

    As such, it is necessary to provide a seed to get the associated KeyPair, which has then access
    to both the public signing key and the private signing key.

    Arguments:
        seed: the seed to decode.

    Returns:
        A KeyPair instance.
    """
    return kp.KeyPair.from_seed(seed)


def from_public_key(
    public_key: t.Union[str, bytes, bytearray], prefix: t.Optional[int] = None
) -> kp.PublicKeyPair:
    """Load a keypair able to verify signatures from an encoded public key.

    When prefix is provided, the public key must be of this type.
    """
    return kp.PublicKeyPair.from_public_key(public_key, prefix=prefix)
