import typing as t

import pytest

from nats_nkeys import KeyPair, create_account, create_user


@pytest.fixture
def account() -> KeyPair:
    """A freshly generated account keypair"""
    return create_account()


@pytest.fixture
def user() -> KeyPair:
    """A freshly generated user keypair"""
    return create_user()


@pytest.fixture
def fixed_rand() -> t.Callable[[int], bytes]:
    """A deterministic random source, always returning the same bytes"""

    def rand(size: int) -> bytes:
        return bytes(range(size))

    return rand
