from enum import IntEnum

CONFIG_DIR_ENV = "NUMERAL_SYSTEMS_CONFIG_DIR"


class Radix(IntEnum):
    OCTAL = 8
    DECIMAL = 10
    HEXADECIMAL = 16


SUPPORTED_RADIXES = frozenset(Radix)
DEFAULT_RADIX = Radix.HEXADECIMAL

# Digit alphabet, indexed by remainder
DIGITS = "0123456789ABCDEF"

INT32_BITS = 32
INT32_MIN = -(1 << (INT32_BITS - 1))
INT32_MAX = (1 << (INT32_BITS - 1)) - 1
SIGN_MASK = INT32_MAX  # 0x7FFFFFFF

# Width of a full 32-bit rendering in each radix
FULL_WIDTH = {
    Radix.OCTAL: 11,
    Radix.HEXADECIMAL: 8,
}

# Contribution of the sign bit to the leading digit of the full-width rendering
SIGN_DIGIT_OFFSET = {
    Radix.OCTAL: 2,
    Radix.HEXADECIMAL: 8,
}

# Rendering of INT32_MIN, where only the sign bit is set
SIGN_ONLY_LITERAL = {
    Radix.OCTAL: "20000000000",
    Radix.HEXADECIMAL: "80000000",
}

RADIX_LABELS = {
    Radix.OCTAL: "octal",
    Radix.DECIMAL: "decimal",
    Radix.HEXADECIMAL: "hexadecimal",
}
