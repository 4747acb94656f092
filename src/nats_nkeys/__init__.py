from .api import (
    create_account,
    create_cluster,
    create_keypair,
    create_operator,
    create_server,
    create_user,
    from_public_key,
    from_seed,
    sign,
    verify,
)
from .kp import BaseKeyPair, KeyPair, PublicKeyPair
from . import algorithms
from . import constants
from . import encoding
from . import errors

__all__ = [
    "BaseKeyPair",
    "KeyPair",
    "PublicKeyPair",
    "algorithms",
    "constants",
    "create_account",
    "create_cluster",
    "create_keypair",
    "create_operator",
    "create_server",
    "create_user",
    "encoding",
    "errors",
    "from_public_key",
    "from_seed",
    "sign",
    "verify",
]
