"""
Module for representing the nucleotide and amino acid alphabets as closed enumerations of ASCII symbols
"""
from enum import Enum
from typing import Final, ClassVar, Iterator

import numpy as np


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class AlphabetError(Exception):
    """Raised when an alphabet is invalid or an operation is incompatible with the alphabet."""


class InvalidSymbolError(AlphabetError):
    """Raised when a character is not one of the symbols of the alphabet being decoded."""
    def __init__(self, symbol: object, alphabet: str):
        super().__init__(f'Invalid {alphabet} symbol: {symbol!r}')
        self.symbol = symbol
        self.alphabet = alphabet


class TranslationError(AlphabetError):
    """Raised when nucleotide-to-amino-acid translation fails (e.g. invalid codon)."""


# Classes --------------------------------------------------------------------------------------------------------------
class Alphabet:
    """
    Lookup tables binding an enumeration of symbols to their ASCII characters.

    Decoding goes through a 256-entry table indexed by character code, so upper and lower case are resolved in a
    single lookup and everything else maps to ``INVALID``.
    """
    __slots__ = ('_name', '_symbol_type', '_members', '_data', '_lookup_table', '_complement')
    DTYPE: Final = np.uint8
    INVALID: Final = np.iinfo(DTYPE).max
    MAX_LEN: Final = INVALID + 1
    ENCODING: Final = 'ascii'

    NUCLEOTIDE: ClassVar['Alphabet']
    DEGENERATE_NUCLEOTIDE: ClassVar['Alphabet']
    AMINO: ClassVar['Alphabet']

    def __init__(self, name: str, symbol_type: type[Enum], symbols: bytes, complement: bytes = None):
        """
        Initializes an Alphabet.

        Args:
            name: Human-readable name used in error messages.
            symbol_type: The enumeration whose members are the symbols, valued ``0..n-1`` in order.
            symbols: The character of each member as bytes, in member order.
            complement: Optional complement of each symbol as bytes. Must be same length as symbols.

        Raises:
            AlphabetError: If symbols are not ASCII, too long, contain duplicates, disagree with the enumeration,
                or if complement is invalid.
        """
        if not symbols.isascii(): raise AlphabetError('Alphabet symbols must be a valid ASCII string')
        if len(symbols) > self.INVALID:
            raise AlphabetError(f'Alphabet size cannot exceed {self.INVALID} symbols ({self.DTYPE})')
        if len(set(symbols.upper())) != len(symbols): raise AlphabetError('Alphabet contains duplicate symbols')
        self._members = tuple(symbol_type)
        if [i.value for i in self._members] != list(range(len(symbols))):
            raise AlphabetError(f'{symbol_type.__name__} members must be valued 0..{len(symbols) - 1} in order')

        self._name = name
        self._symbol_type = symbol_type
        self._data: np.ndarray = np.frombuffer(symbols, dtype=self.DTYPE)

        # Build Lookup Table
        self._lookup_table = np.full(self.MAX_LEN, self.INVALID, dtype=self.DTYPE)
        indices = np.arange(len(symbols), dtype=self.DTYPE)
        self._lookup_table[np.frombuffer(symbols, dtype=self.DTYPE)] = indices
        self._lookup_table[np.frombuffer(symbols.lower(), dtype=self.DTYPE)] = indices
        self._lookup_table.flags.writeable = False

        self._complement = None
        if complement is not None:
            if len(complement) != len(symbols):
                raise AlphabetError("Complement must be the same length as symbols")
            comp_indices = self._lookup_table[np.frombuffer(complement, dtype=self.DTYPE)]
            if np.any(comp_indices == self.INVALID):
                raise AlphabetError("Complement contains symbols not in alphabet")
            # An involution maps every symbol back to itself when applied twice
            if not np.array_equal(comp_indices[comp_indices], indices):
                raise AlphabetError("Complement must pair each symbol with a symbol that pairs back")
            comp_indices.flags.writeable = False
            self._complement = comp_indices

    def __len__(self): return len(self._members)
    def __iter__(self) -> Iterator[Enum]: return iter(self._members)
    def __repr__(self): return f'{self._name}({self._data.tobytes().decode(self.ENCODING)})'

    def __contains__(self, item):
        if isinstance(item, self._symbol_type): return True
        if isinstance(item, (str, bytes)):
            if len(item) != 1: return False
            val = ord(item) if isinstance(item, str) else item[0]
            return val < self.MAX_LEN and self._lookup_table[val] != self.INVALID
        return False

    @property
    def name(self) -> str: return self._name

    @property
    def symbol_type(self) -> type[Enum]:
        """Returns the enumeration this alphabet decodes to."""
        return self._symbol_type

    @property
    def symbols(self) -> str:
        """Returns the canonical (uppercase) characters of the alphabet, in member order."""
        return self._data.tobytes().decode(self.ENCODING)

    @property
    def has_complement(self) -> bool: return self._complement is not None

    def decode(self, char: str) -> Enum:
        """
        Decodes a single character (either case) to its symbol.

        Args:
            char: A one-character string.

        Returns:
            The member of ``symbol_type``.

        Raises:
            InvalidSymbolError: If ``char`` is not exactly one character of this alphabet.
        """
        if isinstance(char, str) and len(char) == 1 and char.isascii():
            if (index := self._lookup_table[ord(char)]) != self.INVALID: return self._members[index]
        raise InvalidSymbolError(char, self._name)

    def encode(self, symbol: Enum) -> str:
        """Returns the uppercase character of a symbol."""
        if not isinstance(symbol, self._symbol_type):
            raise AlphabetError(f'{symbol!r} is not a {self._symbol_type.__name__}')
        return chr(int(self._data[symbol.value]))

    def complement(self, symbol: Enum) -> Enum:
        """
        Returns the base-pairing partner of a symbol.

        Raises:
            AlphabetError: If the alphabet has no complement or the symbol belongs to another alphabet.
        """
        if self._complement is None: raise AlphabetError(f'The {self._name} alphabet has no complement')
        if not isinstance(symbol, self._symbol_type):
            raise AlphabetError(f'{symbol!r} is not a {self._symbol_type.__name__}')
        return self._members[self._complement[symbol.value]]


class _AlphabetSymbol:
    """Behaviour shared by every symbol enumeration; members delegate to their ``Alphabet``."""
    @classmethod
    def alphabet(cls) -> Alphabet: raise NotImplementedError

    @classmethod
    def decode(cls, char: str):
        """Decodes a single character (either case), raising ``InvalidSymbolError`` for anything else."""
        return cls.alphabet().decode(char)

    def encode(self) -> str: return self.alphabet().encode(self)
    def __str__(self): return self.encode()


class _ComplementSymbol(_AlphabetSymbol):
    def complement(self):
        """Returns the base-pairing partner; applying it twice gives back the original symbol."""
        return self.alphabet().complement(self)


class Nucleotide(_ComplementSymbol, Enum):
    """The four exact DNA bases."""
    A = 0
    C = 1
    G = 2
    T = 3

    @classmethod
    def alphabet(cls) -> Alphabet: return Alphabet.NUCLEOTIDE


class DegenerateNucleotide(_ComplementSymbol, Enum):
    """
    The IUPAC nucleotide codes: the four exact bases plus eleven ambiguity codes.

    Examples:
        >>> sorted(map(str, DegenerateNucleotide.R.expand()))
        ['A', 'G']
        >>> DegenerateNucleotide.R.complement()
        <DegenerateNucleotide.Y: 5>
    """
    A = 0
    C = 1
    G = 2
    T = 3
    R = 4
    Y = 5
    S = 6
    W = 7
    K = 8
    M = 9
    B = 10
    D = 11
    H = 12
    V = 13
    N = 14

    @classmethod
    def alphabet(cls) -> Alphabet: return Alphabet.DEGENERATE_NUCLEOTIDE

    @classmethod
    def from_nucleotide(cls, nucleotide: Nucleotide) -> 'DegenerateNucleotide':
        """Returns the unambiguous code standing for an exact base."""
        return cls.decode(nucleotide.encode())

    def expand(self) -> frozenset[Nucleotide]:
        """Returns the set of exact bases this code stands for."""
        return _EXPANSIONS[self.value]


class AminoAcid(_AlphabetSymbol, Enum):
    """
    The twenty standard amino acids and the STOP marker (``*``).

    Each also has a three-letter code. STOP is rendered there as ``" * "`` so that every code is three
    characters wide.
    """
    A = 0
    C = 1
    D = 2
    E = 3
    F = 4
    G = 5
    H = 6
    I = 7
    K = 8
    L = 9
    M = 10
    N = 11
    P = 12
    Q = 13
    R = 14
    S = 15
    T = 16
    V = 17
    W = 18
    Y = 19
    STOP = 20

    @classmethod
    def alphabet(cls) -> Alphabet: return Alphabet.AMINO

    @property
    def is_stop(self) -> bool: return self is AminoAcid.STOP

    def encode_three_letter(self) -> str:
        """
        Returns the uppercase three-letter code.

        Examples:
            >>> AminoAcid.A.encode_three_letter()
            'ALA'
            >>> AminoAcid.STOP.encode_three_letter()
            ' * '
        """
        return _THREE_LETTER_CODES[self.value]

    @classmethod
    def decode_three_letter(cls, text: str) -> 'AminoAcid':
        """
        Decodes a three-letter code in either case; STOP is accepted as ``"*"`` or ``" * "``.

        Raises:
            InvalidSymbolError: If ``text`` is not a three-letter code.
        """
        if isinstance(text, str) and (amino := _FROM_THREE_LETTER.get(text.upper())) is not None: return amino
        raise InvalidSymbolError(text, 'three-letter amino acid')


# Constants ------------------------------------------------------------------------------------------------------------
Alphabet.NUCLEOTIDE = Alphabet('nucleotide', Nucleotide, b'ACGT', b'TGCA')
Alphabet.DEGENERATE_NUCLEOTIDE = Alphabet(
    'degenerate nucleotide', DegenerateNucleotide, b'ACGTRYSWKMBDHVN', b'TGCAYRSWMKVHDBN'
)
Alphabet.AMINO = Alphabet('amino acid', AminoAcid, b'ACDEFGHIKLMNPQRSTVWY*')

_IUPAC: Final = {
    'A': 'A', 'C': 'C', 'G': 'G', 'T': 'T', 'R': 'AG', 'Y': 'CT', 'S': 'CG', 'W': 'AT', 'K': 'GT', 'M': 'AC',
    'B': 'CGT', 'D': 'AGT', 'H': 'ACT', 'V': 'ACG', 'N': 'ACGT'
}
_EXPANSIONS: Final[tuple[frozenset[Nucleotide], ...]] = tuple(
    frozenset(map(Nucleotide.decode, _IUPAC[str(i)])) for i in DegenerateNucleotide
)
_THREE_LETTER_CODES: Final = (
    'ALA', 'CYS', 'ASP', 'GLU', 'PHE', 'GLY', 'HIS', 'ILE', 'LYS', 'LEU', 'MET', 'ASN', 'PRO', 'GLN', 'ARG', 'SER',
    'THR', 'VAL', 'TRP', 'TYR', ' * '
)
_FROM_THREE_LETTER: Final[dict[str, AminoAcid]] = dict(zip(_THREE_LETTER_CODES, AminoAcid)) | {'*': AminoAcid.STOP}

