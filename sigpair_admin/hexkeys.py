"""Normalisation of hex-encoded keys and secrets."""

HEX_PREFIX = '0x'


def strip_hex_prefix(hexstr: str) -> str:
    """Returns the hex string without its '0x' prefix, if it had one."""
    if hexstr.startswith(HEX_PREFIX):
        return hexstr[len(HEX_PREFIX):]
    return hexstr


def decode_hex(hexstr: str) -> bytes:
    """Decodes a hex string, with or without '0x' prefix, into bytes.

    Raises ValueError when the string is not valid hex.
    """
    return bytes.fromhex(strip_hex_prefix(hexstr))
