import base64
import binascii
import typing as t

from . import constants, crc, errors


def _to_bytes(src: t.Union[str, bytes, bytearray]) -> bytes:
    """Make sure string is encoded to bytes"""
    if isinstance(src, str):
        return src.encode("utf-8")
    return bytes(src)


def _b32encode(raw: t.Union[bytes, bytearray]) -> str:
    """Encode bytes to unpadded base32"""
    return base64.b32encode(bytes(raw)).rstrip(b"=").decode("ascii")


def _b32decode(src: t.Union[str, bytes, bytearray]) -> bytes:
    """Decode unpadded base32.

    Padding characters are not accepted, and the string must be the canonical
    encoding of the decoded bytes (unused trailing bits set to zero).
    """
    data = _to_bytes(src)
    if b"=" in data:
        raise errors.InvalidEncodingError()
    # Add missing padding if required.
    padding = b"=" * (-len(data) % 8)
    try:
        raw = base64.b32decode(data + padding)
    except (binascii.Error, ValueError) as exc:
        raise errors.InvalidEncodingError() from exc
    if base64.b32encode(raw).rstrip(b"=") != data:
        raise errors.InvalidEncodingError()
    return raw


def _checksum(raw: t.Union[bytes, bytearray]) -> bytes:
    """Compute the little-endian crc16 checksum of some bytes"""
    return crc.crc16(raw).to_bytes(constants.CHECKSUM_SIZE, byteorder="little")


def _split_checksum(raw: bytes) -> bytes:
    """Verify and strip the trailing checksum of decoded bytes"""
    data, checksum = raw[: -constants.CHECKSUM_SIZE], raw[-constants.CHECKSUM_SIZE :]
    if not crc.validate(data, int.from_bytes(checksum, byteorder="little")):
        raise errors.InvalidChecksumError()
    return data


def valid_prefix_byte(prefix: int) -> bool:
    """Validate prefix bytes."""
    return prefix in constants.PREFIXES


def valid_public_prefix_byte(prefix: int) -> bool:
    """Validate public prefix bytes."""
    return prefix in constants.PUBLIC_PREFIXES


def encode(prefix: int, payload: t.Union[bytes, bytearray]) -> str:
    """Encode some bytes with a prefix byte and a crc16 checksum.

    Arguments:
        prefix: one of the PREFIX_BYTE_* constants.
        payload: the raw bytes to encode.

    Returns:
        The base32 encoded key, without padding.
    """
    if not valid_prefix_byte(prefix):
        raise errors.InvalidPrefixByteError()
    raw = bytearray([prefix])
    raw += payload
    # Calculate and include crc16 checksum
    raw += _checksum(raw)
    return _b32encode(raw)


def decode(expected_prefix: int, src: t.Union[str, bytes, bytearray]) -> bytes:
    """Decode an encoded key, checking its checksum and its prefix byte.

    Arguments:
        expected_prefix: the prefix byte the key must carry.
        src: the encoded key.

    Returns:
        The raw bytes following the prefix byte.
    """
    if not valid_prefix_byte(expected_prefix):
        raise errors.InvalidPrefixByteError()
    raw = _b32decode(src)
    # Prefix byte and checksum at least
    if len(raw) < 1 + constants.CHECKSUM_SIZE:
        raise errors.InvalidEncodingError()
    raw = _split_checksum(raw)
    # 248 = 11111000
    if raw[0] & 248 != expected_prefix:
        raise errors.InvalidPrefixByteError()
    return raw[1:]


def prefix_of(src: t.Union[str, bytes, bytearray]) -> int:
    """Return the prefix byte of an encoded key, or PREFIX_BYTE_SEED for seeds."""
    raw = _b32decode(src)
    if len(raw) < 1 + constants.CHECKSUM_SIZE:
        raise errors.InvalidEncodingError()
    raw = _split_checksum(raw)
    prefix = raw[0] & 248
    if not valid_prefix_byte(prefix):
        raise errors.InvalidPrefixByteError()
    return prefix


def encode_seed(prefix: int, raw_seed: t.Union[bytes, bytearray]) -> str:
    """Encode a seed from a public prefix and 64 bytes of seed material"""
    if not valid_public_prefix_byte(prefix):
        raise errors.InvalidPrefixByteError()
    if len(raw_seed) != constants.SEED_SIZE:
        raise errors.InvalidSeedLengthError()
    # Encode first two bytes
    # The 5 bits of the seed prefix are followed by the 8 bits of the public prefix
    first_byte = constants.PREFIX_BYTE_SEED | (prefix >> 5)
    second_byte = (prefix & 31) << 3
    seed = bytearray([first_byte, second_byte])
    seed += raw_seed
    # Append crc16 checksum
    seed += _checksum(seed)
    return _b32encode(seed)


def decode_seed(src: t.Union[str, bytes, bytearray]) -> t.Tuple[int, bytes]:
    """Decode a seed into public prefix and seed material."""
    raw = _b32decode(src)
    # Check length (two prefix bytes + seed material + checksum)
    if len(raw) != 2 + constants.SEED_SIZE + constants.CHECKSUM_SIZE:
        raise errors.InvalidSeedLengthError()
    # Check seed prefix
    # 248 = 11111000
    seed_prefix = raw[0] & 248
    if seed_prefix != constants.PREFIX_BYTE_SEED:
        raise errors.InvalidSeedError()
    # Check public prefix
    # 7 = 00000111
    public_prefix = (raw[0] & 7) << 5 | ((raw[1] & 248) >> 3)
    if not valid_public_prefix_byte(public_prefix):
        raise errors.InvalidPrefixByteError()
    raw = _split_checksum(raw)
    return public_prefix, raw[2:]


def is_valid_public_key(
    src: t.Union[str, bytes, bytearray], prefix: t.Optional[int] = None
) -> bool:
    """Check that a string is a valid encoded public key, optionally of a given type."""
    try:
        found = prefix_of(src)
        if not valid_public_prefix_byte(found):
            return False
        if prefix is not None and found != prefix:
            return False
        return len(decode(found, src)) == constants.PUBLIC_KEY_SIZE
    except errors.NkeysError:
        return False


def is_valid_seed(src: t.Union[str, bytes, bytearray]) -> bool:
    """Check that a string is a valid encoded seed."""
    try:
        decode_seed(src)
        return True
    except errors.NkeysError:
        return False
