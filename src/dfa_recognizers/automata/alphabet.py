from collections.abc import Iterable, Iterator
from typing import NewType

from .exceptions import (
    DelimiterInSymbolError,
    DuplicateSymbolError,
    EmptyAlphabetError,
    EmptySymbolError
)

Symbol = NewType('Symbol', str)
Word = tuple[Symbol, ...]

DEFAULT_DELIMITER = ','

def decode_word(text: str, delimiter: str=DEFAULT_DELIMITER) -> Word:
    """Split the textual encoding of a word into its symbols. The empty string
    is the empty word."""
    if not text:
        return ()
    return tuple(Symbol(s) for s in text.split(delimiter))

def encode_word(word: Iterable[str], delimiter: str=DEFAULT_DELIMITER) -> str:
    return delimiter.join(word)

def as_word(word: str | Iterable[str]) -> Word:
    if isinstance(word, str):
        return decode_word(word)
    return tuple(word) # type: ignore

class Alphabet:
    """An immutable, non-empty set of symbols. Symbols may not contain the
    comma, which separates symbols in the textual encoding of words."""

    _symbols: frozenset[Symbol]

    def __init__(self, symbols: Iterable[str]):
        super().__init__()
        seen = set()
        for symbol in symbols:
            if not isinstance(symbol, str) or not symbol:
                raise EmptySymbolError
            if DEFAULT_DELIMITER in symbol:
                raise DelimiterInSymbolError(symbol, DEFAULT_DELIMITER)
            if symbol in seen:
                raise DuplicateSymbolError(symbol)
            seen.add(symbol)
        if not seen:
            raise EmptyAlphabetError
        self._symbols = frozenset(seen) # type: ignore

    def symbols(self) -> frozenset[Symbol]:
        return self._symbols

    def is_valid_symbol(self, symbol: str) -> bool:
        return symbol in self._symbols

    def is_valid_word(self, word: str | Iterable[str]) -> bool:
        """A word is valid if all of its symbols are valid. The word may be
        given as a sequence of symbols or as a comma-separated string."""
        return all(self.is_valid_symbol(s) for s in as_word(word))

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._symbols

    def __iter__(self) -> Iterator[Symbol]:
        return iter(sorted(self._symbols))

    def __len__(self) -> int:
        return len(self._symbols)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Alphabet):
            return self._symbols == other._symbols
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f'Alphabet({sorted(self._symbols)!r})'
