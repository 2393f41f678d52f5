"""Digit alphabets for fixed-width string encodings."""

from core.errors import ConversionError


class Alphabet:
    """Ordered symbol set: symbols[d] is the symbol for digit d."""

    __slots__ = ("name", "symbols", "radix", "_digits")

    def __init__(self, name, symbols):
        if len(set(symbols)) != len(symbols):
            raise ValueError(f"alphabet {name!r} has duplicate symbols")
        self.name = name
        self.symbols = symbols
        self.radix = len(symbols)
        self._digits = {symbol: digit for digit, symbol in enumerate(symbols)}

    @property
    def zero(self):
        return self.symbols[0]

    def digit(self, symbol):
        try:
            return self._digits[symbol]
        except KeyError as exc:
            raise ConversionError(f"invalid {self.name} character: {symbol!r}", alphabet=self.name,
                                  op=f"alphabet:{self.name}") from exc

    def __contains__(self, symbol):
        return symbol in self._digits

    def __repr__(self):
        return f"Alphabet({self.name!r}, radix={self.radix})"


HEX = Alphabet("hex", "0123456789abcdef")
# ASCII-ascending, so equal-length strings sort like the integers they encode
BASE62 = Alphabet("base62", "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
