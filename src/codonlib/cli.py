"""
Command-line entry point: decode a nucleotide string, then print its reverse complement and translation.
"""
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from dataclasses import dataclass
import sys
from typing import IO, Sequence
from warnings import warn

from codonlib import TranslationWarning
from codonlib.core.alphabet import AlphabetError, Nucleotide, DegenerateNucleotide
from codonlib.core.genetic_code import translate, to_three_letter
from codonlib.containers.seq import Seq
from codonlib.utils import Config
from codonlib.utils.resources import RESOURCES


# Classes --------------------------------------------------------------------------------------------------------------
@dataclass(slots=True, frozen=True, kw_only=True)
class CliConfig(Config):
    """Options of the command line, see ``build_parser``."""
    nts: str
    degenerate: bool = False
    three_letter: bool = False


# Functions ------------------------------------------------------------------------------------------------------------
def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog=RESOURCES.package, formatter_class=RawDescriptionHelpFormatter, add_help=False,
        description='Reverse complement and translate a nucleotide sequence',
        usage="%(prog)s --nts <sequence> [options]"
    )
    inputs = parser.add_argument_group('Inputs')
    inputs.add_argument('--nts', metavar='<sequence>', required=True, help='Nucleotide input (either case)')
    inputs.add_argument('--degenerate', action='store_true',
                        help='Accept IUPAC ambiguity codes (translation is skipped)')
    outputs = parser.add_argument_group('Outputs')
    outputs.add_argument('--three-letter', action='store_true',
                         help='Also print the translation with three-letter amino acid codes')
    opts = parser.add_argument_group('Other options')
    opts.add_argument('-v', '--version', help='Show version number and exit', action='version',
                      version=f'%(prog)s {RESOURCES.version}')
    opts.add_argument('-h', '--help', help='Show this help message and exit', action='help')
    return parser


def run(config: CliConfig, out: IO = None):
    """
    Decodes ``config.nts`` and writes the results, one labelled line each.

    Raises:
        InvalidSymbolError: If the input is not a valid nucleotide string.
    """
    out = out or sys.stdout
    seq = Seq.decode(DegenerateNucleotide if config.degenerate else Nucleotide, config.nts)
    out.write(f'input: {seq}\n')
    out.write(f'reverse complement: {seq.reverse_complement()}\n')
    if config.degenerate: return  # Only exact nucleotides translate
    if remainder := len(seq) % 3:
        warn(f'Ignoring {remainder} trailing base(s) that do not form a complete codon', TranslationWarning)
    protein = translate(seq)
    out.write(f'translation: {protein}\n')
    if config.three_letter: out.write(f'three-letter: {to_three_letter(protein)}\n')


# Main CLI Entry Point -------------------------------------------------------------------------------------------------
def main(argv: Sequence[str] = None):
    parser = build_parser()
    config = CliConfig.from_obj(parser.parse_args(argv))
    try:
        run(config)
    except AlphabetError as e:
        parser.exit(1, f'{parser.prog}: error: {e}\n')


if __name__ == '__main__':
    main()
