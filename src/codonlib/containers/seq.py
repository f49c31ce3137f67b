"""Generic sequence and codon containers, parameterised by the symbol enumeration they hold."""
from typing import Union, Iterable, Iterator, Generic, TypeVar, Sequence as SequenceLike

import numpy as np

from codonlib.core.alphabet import AlphabetError
from codonlib.utils.protocols import Symbol, Complementable, HasSymbolType
from codonlib.utils.resources import RESOURCES

S = TypeVar('S', bound=Symbol)


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class SeqError(Exception):
    """Raised when a sequence or codon is built or combined from incompatible symbols."""


class CodonOutOfBoundsError(SeqError, IndexError):
    """Raised when a codon window does not fit inside its sequence."""
    def __init__(self, index: int, length: int):
        super().__init__(f'Codon at index {index} does not fit in a sequence of length {length}')
        self.index = index
        self.length = length


class CodonLengthError(SeqError):
    """Raised when codon text is not exactly three characters long."""
    def __init__(self, text: str):
        super().__init__(f'Codon text must be 3 characters long, got {len(text)}: {text!r}')
        self.text = text


# Classes --------------------------------------------------------------------------------------------------------------
class Seq(HasSymbolType, Generic[S]):
    """
    Mutable, ordered list of symbols from a single alphabet.

    Derived sequences (reverse complement, translation) are always new objects; the source is only ever changed
    through ``append`` and ``extend``.

    Args:
        symbol_type: The symbol enumeration (e.g. ``Nucleotide``).
        symbols: Optional initial symbols, all members of ``symbol_type``.

    Examples:
        >>> from codonlib.core.alphabet import Nucleotide
        >>> seq = Seq.decode(Nucleotide, 'GTAAAAC')
        >>> len(seq)
        7
        >>> str(seq.reverse_complement())
        'GTTTTAC'
    """
    __slots__ = ('_symbol_type', '_data')
    __hash__ = None  # Mutable

    def __init__(self, symbol_type: type[S], symbols: Iterable[S] = ()):
        if not isinstance(symbol_type, type) or not issubclass(symbol_type, Symbol):
            raise TypeError(f'{symbol_type!r} is not a symbol type')
        self._symbol_type = symbol_type
        self._data: list[S] = []
        self.extend(symbols)

    @classmethod
    def decode(cls, symbol_type: type[S], text: str) -> 'Seq[S]':
        """
        Decodes text one character at a time.

        Args:
            symbol_type: The symbol enumeration to decode to.
            text: The text to decode, in either case. The empty string gives an empty sequence.

        Returns:
            A new ``Seq``.

        Raises:
            InvalidSymbolError: For the first character that is not in the alphabet.
        """
        return cls(symbol_type, map(symbol_type.decode, text))

    @classmethod
    def random(cls, symbol_type: type[S], length: int = None, rng: np.random.Generator = None, min_len: int = 5,
               max_len: int = 5000) -> 'Seq[S]':
        """
        Generates a random sequence of symbols, each drawn uniformly from the alphabet.

        Args:
            symbol_type: The symbol enumeration to draw from.
            length: Exact length of sequence to generate.
            rng: Random number generator (optional).
            min_len: Minimum length if length is not specified.
            max_len: Maximum length if length is not specified.

        Returns:
            A random ``Seq``.

        Examples:
            >>> from codonlib.core.alphabet import Nucleotide
            >>> len(Seq.random(Nucleotide, length=10))
            10
        """
        if rng is None: rng = RESOURCES.rng
        if length is None: length = int(rng.integers(min_len, max_len))
        members = tuple(symbol_type.alphabet())
        return cls(symbol_type, (members[i] for i in rng.integers(0, len(members), size=length)))

    @property
    def symbol_type(self) -> type[S]:
        """Returns the symbol enumeration of this sequence."""
        return self._symbol_type

    def append(self, symbol: S):
        """Appends one symbol, which must be a member of ``symbol_type``."""
        if not isinstance(symbol, self._symbol_type):
            raise SeqError(f'Cannot append {symbol!r} to a {self._symbol_type.__name__} sequence')
        self._data.append(symbol)

    def extend(self, symbols: Iterable[S]):
        for symbol in symbols: self.append(symbol)

    def encode(self) -> str:
        """
        Encodes the sequence as uppercase text.

        Examples:
            >>> from codonlib.core.alphabet import Nucleotide
            >>> Seq.decode(Nucleotide, 'acgt').encode()
            'ACGT'
        """
        return ''.join(i.encode() for i in self._data)

    def reverse_complement(self) -> 'Seq[S]':
        """
        Returns a new sequence of the complemented symbols in reverse order.

        Raises:
            AlphabetError: If the symbols have no complement (e.g. amino acids).
        """
        if not issubclass(self._symbol_type, Complementable):
            raise AlphabetError(f'{self._symbol_type.__name__} symbols have no complement')
        return Seq(self._symbol_type, (i.complement() for i in reversed(self._data)))

    def codon_at(self, index: int) -> 'Codon[S]':
        """
        Returns a copy of the three symbols starting at ``index``.

        Raises:
            CodonOutOfBoundsError: If ``index + 3`` exceeds the length of the sequence.
        """
        return Codon.from_slice(self, index)

    def codons(self) -> Iterator['Codon[S]']:
        """
        Yields the non-overlapping codons of reading frame 0.

        Iteration stops as soon as fewer than three symbols remain, so a trailing one or two symbols are
        never part of a codon. Each call starts again from the beginning.

        Examples:
            >>> from codonlib.core.alphabet import Nucleotide
            >>> [str(i) for i in Seq.decode(Nucleotide, 'GTAAAACAGT').codons()]
            ['GTA', 'AAA', 'CAG']
        """
        for index in range(0, len(self._data) - 2, 3): yield self.codon_at(index)

    def __len__(self): return len(self._data)
    def __iter__(self) -> Iterator[S]: return iter(self._data)
    def __bool__(self): return len(self._data) > 0
    def __str__(self): return self.encode()
    def __repr__(self):
        if len(self) <= 14: return str(self)
        head = ''.join(i.encode() for i in self._data[:7])
        tail = ''.join(i.encode() for i in self._data[-7:])
        return f"{head}...{tail}"

    def __eq__(self, other):
        if self is other: return True
        if not isinstance(other, Seq): return False
        return self._symbol_type is other._symbol_type and self._data == other._data

    def __add__(self, other: 'Seq[S]') -> 'Seq[S]':
        if not isinstance(other, Seq): return NotImplemented
        if self._symbol_type is not other._symbol_type:
            raise SeqError("Cannot concatenate sequences with different symbol types")
        return Seq(self._symbol_type, self._data + other._data)

    def __getitem__(self, item: Union[slice, int]) -> Union[S, 'Seq[S]']:
        """Returns the symbol at an index, or a new ``Seq`` for a slice."""
        if isinstance(item, slice): return Seq(self._symbol_type, self._data[item])
        return self._data[item]


class Codon(HasSymbolType, Generic[S]):
    """
    Exactly three symbols from a single alphabet, the unit of translation.

    Codons own their symbols: one taken from a ``Seq`` is a copy and does not change with it.

    Examples:
        >>> from codonlib.core.alphabet import Nucleotide
        >>> Codon.from_text(Nucleotide, 'GTA') == Codon.from_symbols(Nucleotide.G, Nucleotide.T, Nucleotide.A)
        True
    """
    __slots__ = ('_data',)
    LENGTH = 3

    def __init__(self, first: S, second: S, third: S):
        if not isinstance(first, Symbol) or not all(isinstance(i, type(first)) for i in (second, third)):
            raise SeqError(f'Codon symbols must be members of the same alphabet: {first!r}, {second!r}, {third!r}')
        self._data: tuple[S, S, S] = (first, second, third)

    @classmethod
    def from_symbols(cls, first: S, second: S, third: S) -> 'Codon[S]':
        return cls(first, second, third)

    @classmethod
    def from_text(cls, symbol_type: type[S], text: str) -> 'Codon[S]':
        """
        Decodes a three-character string.

        Raises:
            CodonLengthError: If ``text`` is not three characters long.
            InvalidSymbolError: For the first character that is not in the alphabet.
        """
        if len(text) != cls.LENGTH: raise CodonLengthError(text)
        return cls(*map(symbol_type.decode, text))

    @classmethod
    def from_slice(cls, source: SequenceLike[S], index: int = 0) -> 'Codon[S]':
        """
        Copies the three symbols of ``source`` starting at ``index``.

        Args:
            source: A ``Seq`` or any indexable of symbols.
            index: Offset of the first symbol.

        Raises:
            CodonOutOfBoundsError: If the window does not fit in ``source``.
        """
        if index < 0 or index + cls.LENGTH > len(source): raise CodonOutOfBoundsError(index, len(source))
        return cls(source[index], source[index + 1], source[index + 2])

    @property
    def symbol_type(self) -> type[S]: return type(self._data[0])

    def encode(self) -> str:
        """Returns the three characters of the codon, uppercase."""
        return ''.join(i.encode() for i in self._data)

    def __len__(self): return self.LENGTH
    def __iter__(self) -> Iterator[S]: return iter(self._data)
    def __getitem__(self, item: int) -> S: return self._data[item]
    def __str__(self): return self.encode()
    def __repr__(self): return f"{type(self).__name__}({self.encode()!r})"
    def __hash__(self): return hash(self._data)
    def __eq__(self, other):
        if not isinstance(other, Codon): return False
        return self._data == other._data
