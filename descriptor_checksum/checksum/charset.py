"""
Character sets used by the descriptor checksum.
"""

# 95 symbols: code & 31 is the symbol value, code >> 5 its class (0-2)
INPUT_CHARSET = (
    "0123456789()[],'/*abcdefgh@:$%{}"
    "IJKLMNOPQRSTUVWXYZ&+-.;<=>?!^_|~"
    "ijklmnopqrstuvwxyzABCDEFGH`#\"\\ "
)

# 32 symbols (bech32 alphabet) used to render checksum digits
CHECKSUM_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"

CHECKSUM_LENGTH = 8

_INPUT_CODES = {ch: code for code, ch in enumerate(INPUT_CHARSET)}


def input_code(ch: str) -> int:
    """
    Look up the position of a character in the input charset.

    Returns:
        Code in range 0-93, or -1 if the character is not allowed.
    """
    return _INPUT_CODES.get(ch, -1)


def is_checksum_string(value: str) -> bool:
    """Check that value has the shape of a checksum (8 chars of CHECKSUM_CHARSET)."""
    return len(value) == CHECKSUM_LENGTH and all(c in CHECKSUM_CHARSET for c in value)
