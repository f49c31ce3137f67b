from typing import Protocol, runtime_checkable, Iterable


@runtime_checkable
class Symbol(Protocol):
    """Protocol for the members of an alphabet: one character in, one character out."""
    @classmethod
    def decode(cls, char: str) -> 'Symbol': ...
    @classmethod
    def alphabet(cls) -> 'Alphabet': ...
    def encode(self) -> str: ...


@runtime_checkable
class Complementable(Protocol):
    """Protocol for symbols with a base-pairing partner (e.g. Nucleotide)."""
    def complement(self) -> 'Complementable': ...


@runtime_checkable
class Expandable(Protocol):
    """Protocol for ambiguity codes that stand for a set of exact symbols (e.g. DegenerateNucleotide)."""
    def expand(self) -> Iterable['Symbol']: ...


@runtime_checkable
class HasSymbolType(Protocol):
    """Protocol for containers bound to a single symbol type (e.g. Seq, Codon)."""
    @property
    def symbol_type(self) -> type['Symbol']: ...
