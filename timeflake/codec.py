"""Arbitrary-precision integer <-> fixed-width alphabet string."""

from core.errors import ConversionError


def int_to_ascii(n, alphabet, width):
    """Encode n in alphabet, left-padded with the zero symbol to exactly width chars.

    Raises ConversionError when n is negative or needs more than width digits.
    """
    op = f"codec:encode_{alphabet.name}"
    if n < 0:
        raise ConversionError(f"cannot encode negative value {n}", alphabet=alphabet.name, op=op)

    chars = []
    while n > 0:
        n, remainder = divmod(n, alphabet.radix)
        chars.append(alphabet.symbols[remainder])

    if len(chars) > width:
        raise ConversionError(f"value needs {len(chars)} digits, width is {width}", alphabet=alphabet.name, op=op)

    return "".join(reversed(chars)).rjust(width, alphabet.zero)


def ascii_to_int(s, alphabet):
    """Decode a string of alphabet symbols back to an integer."""
    if not s:
        raise ConversionError("cannot decode empty string", alphabet=alphabet.name, op=f"codec:decode_{alphabet.name}")

    n = 0
    for char in s:
        n = n * alphabet.radix + alphabet.digit(char)
    return n
