"""CRC16/XMODEM checksum used to protect encoded keys.

Polynomial 0x1021, initial value 0, no reflection and no final xor.
"""


def _make_table(poly: int = 0x1021) -> tuple:
    table = []
    for byte in range(256):
        crc = byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ poly) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
        table.append(crc)
    return tuple(table)


CRC16_TABLE = _make_table()


def crc16(data: bytes) -> int:
    """Compute the crc16 checksum of some bytes"""
    crc = 0
    for byte in data:
        crc = ((crc << 8) & 0xFFFF) ^ CRC16_TABLE[((crc >> 8) ^ byte) & 0xFF]
    return crc


def validate(data: bytes, expected: int) -> bool:
    """Check that the crc16 checksum of some bytes matches expected value"""
    return crc16(data) == expected
