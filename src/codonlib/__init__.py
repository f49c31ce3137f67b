"""
Top-level module for typed biological sequences: alphabets, codons and translation.

Examples:
    >>> from codonlib.core.alphabet import Nucleotide
    >>> from codonlib.containers.seq import Seq
    >>> from codonlib.core.genetic_code import translate
    >>> str(translate(Seq.decode(Nucleotide, 'AAAGTGACC')))
    'KVT'
"""


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class CodonlibWarning(Warning):
    """
    A warning class for this package, making it easy to silence all our warning messages should you wish to.

    Examples:
        >>> import warnings
        >>> from codonlib import CodonlibWarning
        >>> warnings.simplefilter('ignore', CodonlibWarning)
    """


class TranslationWarning(CodonlibWarning):
    """Issued when part of a nucleotide input does not contribute to its translation."""
