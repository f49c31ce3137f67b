"""
Module for translating exact nucleotide codons and sequences to amino acids with the standard genetic code
"""
from typing import ClassVar, Final

import numpy as np

from codonlib.core.alphabet import (Alphabet, AlphabetError, TranslationError, InvalidSymbolError, Nucleotide,
                                   DegenerateNucleotide, AminoAcid)
from codonlib.containers.seq import Seq, Codon
from codonlib.utils.protocols import HasSymbolType


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class UntranslatableCodonError(TranslationError):
    """Raised when the text of a codon is not one of the 64 triplets over A, C, G and T."""
    def __init__(self, codon: str):
        super().__init__(f'Cannot translate codon {codon!r}')
        self.codon = codon


# Classes --------------------------------------------------------------------------------------------------------------
class GeneticCode:
    """
    Represents a genetic code table for translation.

    The table is indexed by ``16 * i + 4 * j + k`` where ``i``, ``j`` and ``k`` are the positions of the three
    bases in ``ACGT``.
    """
    __slots__ = ('_name', '_data', '_stops')
    _DNA = Alphabet.NUCLEOTIDE
    _AMINO = Alphabet.AMINO
    STANDARD: ClassVar['GeneticCode']

    def __init__(self, name: str, table: bytes):
        """Initializes a genetic code.

        Args:
            name: Name of the code.
            table: 64-byte ASCII string of amino acid symbols (``*`` for STOP), in codon index order.

        Raises:
            AlphabetError: If the table is not 64 amino acid symbols long.
        """
        if len(table) != 64: raise AlphabetError(f'A genetic code table needs 64 entries, got {len(table)}')
        # Optimization: Pre-encode the table to indices using lookup table directly
        self._data = self._AMINO._lookup_table[np.frombuffer(table, dtype=Alphabet.DTYPE)]
        if np.any(self._data == Alphabet.INVALID): raise AlphabetError('Genetic code table contains invalid symbols')
        self._data.flags.writeable = False
        self._stops = np.frombuffer(table, dtype=Alphabet.DTYPE) == ord('*')
        self._name = name

    def __repr__(self): return f'{type(self).__name__}({self._name})'

    @property
    def name(self) -> str: return self._name

    @property
    def stop_codons(self) -> frozenset[Codon[Nucleotide]]:
        """Returns the codons that translate to STOP."""
        return frozenset(_codon_from_index(int(i)) for i in np.flatnonzero(self._stops))

    def _index(self, codon: Codon) -> int:
        """Returns the 6-bit table index of a nucleotide codon, keyed on its text."""
        text = codon.encode()
        if codon.symbol_type not in _NUCLEOTIDE_TYPES: raise UntranslatableCodonError(text)
        if len(text) != 3 or not text.isascii(): raise UntranslatableCodonError(text)
        bases = self._DNA._lookup_table[np.frombuffer(text.encode(Alphabet.ENCODING), dtype=Alphabet.DTYPE)]
        if np.any(bases == Alphabet.INVALID): raise UntranslatableCodonError(text)
        return (int(bases[0]) << 4) | (int(bases[1]) << 2) | int(bases[2])

    def translate_codon(self, codon: Codon) -> AminoAcid:
        """
        Translates one codon.

        Args:
            codon: A nucleotide codon; only its text is looked up, so a degenerate codon spelling one of the 64
                triplets works.

        Returns:
            The amino acid, or ``AminoAcid.STOP``.

        Raises:
            UntranslatableCodonError: If the codon is not made of nucleotides or its text is not a triplet over A, C, G
                and T.

        Examples:
            >>> GeneticCode.STANDARD.translate_codon(Codon.from_text(Nucleotide, 'ATG'))
            <AminoAcid.M: 10>
        """
        return AminoAcid(int(self._data[self._index(codon)]))

    def is_stop(self, codon: Codon) -> bool:
        """Returns True if the codon translates to STOP."""
        return bool(self._stops[self._index(codon)])

    def translate(self, seq: Seq[Nucleotide]) -> Seq[AminoAcid]:
        """
        Translates reading frame 0 of a nucleotide sequence, codon by codon.

        A trailing partial codon is ignored, so sequences shorter than 3 translate to an empty protein.
        STOP codons are translated to ``AminoAcid.STOP`` and translation carries on past them.

        Args:
            seq: The nucleotide sequence (left unchanged).

        Returns:
            A new amino acid ``Seq``.

        Raises:
            AlphabetError: If ``seq`` is not a ``Nucleotide`` sequence.
            UntranslatableCodonError: For the first codon that cannot be translated.
        """
        if not isinstance(seq, HasSymbolType) or seq.symbol_type is not Nucleotide:
            raise AlphabetError(f'Only Nucleotide sequences can be translated, not {seq!r}')
        protein = Seq(AminoAcid)
        for codon in seq.codons(): protein.append(self.translate_codon(codon))
        return protein


# Functions ------------------------------------------------------------------------------------------------------------
def _codon_from_index(index: int) -> Codon[Nucleotide]:
    return Codon(Nucleotide(index >> 4), Nucleotide((index >> 2) & 3), Nucleotide(index & 3))


def translate_codon(codon: Codon[Nucleotide]) -> AminoAcid:
    """Translates one codon with the standard genetic code."""
    return GeneticCode.STANDARD.translate_codon(codon)


def translate(seq: Seq[Nucleotide]) -> Seq[AminoAcid]:
    """
    Translates a nucleotide sequence with the standard genetic code.

    Examples:
        >>> str(translate(Seq.decode(Nucleotide, 'AAAGTGACC')))
        'KVT'
    """
    return GeneticCode.STANDARD.translate(seq)


def to_three_letter(protein: Seq[AminoAcid]) -> str:
    """
    Renders an amino acid sequence with three-letter codes, three characters per residue.

    Examples:
        >>> to_three_letter(Seq.decode(AminoAcid, 'MK*'))
        'METLYS * '
    """
    if protein.symbol_type is not AminoAcid: raise AlphabetError('Only AminoAcid sequences have three-letter codes')
    return ''.join(i.encode_three_letter() for i in protein)


def from_three_letter(text: str) -> Seq[AminoAcid]:
    """
    Parses fixed-width three-letter codes back into an amino acid sequence.

    Raises:
        InvalidSymbolError: For the first chunk that is not a three-letter code, including a short trailing chunk.
    """
    protein = Seq(AminoAcid)
    for start in range(0, len(text), _THREE_LETTER_WIDTH):
        chunk = text[start:start + _THREE_LETTER_WIDTH]
        if len(chunk) != _THREE_LETTER_WIDTH: raise InvalidSymbolError(chunk, 'three-letter amino acid')
        protein.append(AminoAcid.decode_three_letter(chunk))
    return protein


# Constants ------------------------------------------------------------------------------------------------------------
_THREE_LETTER_WIDTH: Final = 3
_NUCLEOTIDE_TYPES: Final = (Nucleotide, DegenerateNucleotide)
GeneticCode.STANDARD = GeneticCode('standard', b'KNKNTTTTRSRSIIMIQHQHPPPPRRRRLLLLEDEDAAAAGGGGVVVV*Y*YSSSS*CWCLFLF')
