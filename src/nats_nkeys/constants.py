# PREFIX_BYTE_SEED is the version byte used for encoded NATS Seeds
PREFIX_BYTE_SEED = 18 << 3  # Base32-encodes to 'S...'

# PREFIX_BYTE_PRIVATE is the version byte used for encoded NATS Private keys
PREFIX_BYTE_PRIVATE = 15 << 3  # Base32-encodes to 'P...'

# PREFIX_BYTE_SERVER is the version byte used for encoded NATS Servers
PREFIX_BYTE_SERVER = 13 << 3  # Base32-encodes to 'N...'

# PREFIX_BYTE_CLUSTER is the version byte used for encoded NATS Clusters
PREFIX_BYTE_CLUSTER = 2 << 3  # Base32-encodes to 'C...'

# PREFIX_BYTE_OPERATOR is the version byte used for encoded NATS Operators
PREFIX_BYTE_OPERATOR = 14 << 3  # Base32-encodes to 'O...'

# PREFIX_BYTE_ACCOUNT is the version byte used for encoded NATS Accounts
PREFIX_BYTE_ACCOUNT = 0  # Base32-encodes to 'A...'

# PREFIX_BYTE_USER is the version byte used for encoded NATS Users
PREFIX_BYTE_USER = 20 << 3  # Base32-encodes to 'U...'

# PREFIX_BYTE_CURVE is the version byte used for encoded curve (encryption) keys
PREFIX_BYTE_CURVE = 23 << 3  # Base32-encodes to 'X...'

# PREFIX_BYTE_UNKNOWN marks an unknown prefix and is never accepted
PREFIX_BYTE_UNKNOWN = 25 << 3  # Base32-encodes to 'Z...'

# Prefix bytes which may be embedded into a seed
PUBLIC_PREFIXES = frozenset(
    [
        PREFIX_BYTE_SERVER,
        PREFIX_BYTE_CLUSTER,
        PREFIX_BYTE_OPERATOR,
        PREFIX_BYTE_ACCOUNT,
        PREFIX_BYTE_USER,
        PREFIX_BYTE_CURVE,
    ]
)

# All prefix bytes accepted by encode() and decode()
PREFIXES = PUBLIC_PREFIXES | {PREFIX_BYTE_SEED, PREFIX_BYTE_PRIVATE}

# Prefix bytes of ed25519 signing keys, by access type
SIGNING_PREFIXES = {
    "account": PREFIX_BYTE_ACCOUNT,
    "cluster": PREFIX_BYTE_CLUSTER,
    "operator": PREFIX_BYTE_OPERATOR,
    "server": PREFIX_BYTE_SERVER,
    "user": PREFIX_BYTE_USER,
}

# Length of the raw ed25519 seed used to generate a keypair
ED25519_SEED_SIZE = 32

# Length of a raw ed25519 public key
PUBLIC_KEY_SIZE = 32

# Length of the seed material carried by an encoded seed (ed25519 seed + public key)
SEED_SIZE = 64

# Length of a raw ed25519 private key (ed25519 seed + public key)
PRIVATE_KEY_SIZE = 64

# Length of an ed25519 signature
SIGNATURE_SIZE = 64

# Length of the crc16 checksum appended to every encoded key
CHECKSUM_SIZE = 2
