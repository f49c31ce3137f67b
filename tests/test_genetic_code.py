from itertools import product

import pytest

from codonlib.core.alphabet import AlphabetError, InvalidSymbolError, Nucleotide, DegenerateNucleotide, AminoAcid
from codonlib.core.genetic_code import (GeneticCode, UntranslatableCodonError, TranslationError, translate,
                                        translate_codon, to_three_letter, from_three_letter)
from codonlib.containers.seq import Seq, Codon


class TestGeneticCodeInit:
    def test_wrong_length(self):
        with pytest.raises(AlphabetError, match="64 entries"):
            GeneticCode('short', b'KNKN')

    def test_invalid_symbols(self):
        with pytest.raises(AlphabetError, match="invalid symbols"):
            GeneticCode('bad', b'X' * 64)

    def test_standard(self):
        assert GeneticCode.STANDARD.name == 'standard'
        assert {i.encode() for i in GeneticCode.STANDARD.stop_codons} == {'TAA', 'TAG', 'TGA'}


class TestTranslateCodon:
    def test_total_coverage(self):
        translations = {}
        for chars in product('ACGT', repeat=3):
            codon = Codon.from_text(Nucleotide, ''.join(chars))
            translations[codon.encode()] = translate_codon(codon)
        assert len(translations) == 64
        assert set(translations.values()) == set(AminoAcid)

    @pytest.mark.parametrize('text, amino', [
        ('ATG', 'M'), ('TGG', 'W'), ('AAA', 'K'), ('GTG', 'V'), ('ACC', 'T'), ('GCT', 'A'), ('TGT', 'C'),
        ('GAC', 'D'), ('GAG', 'E'), ('TTC', 'F'), ('GGA', 'G'), ('CAT', 'H'), ('ATA', 'I'), ('CTG', 'L'),
        ('TTA', 'L'), ('AAT', 'N'), ('CCC', 'P'), ('CAA', 'Q'), ('AGA', 'R'), ('CGT', 'R'), ('AGC', 'S'),
        ('TCG', 'S'), ('TAT', 'Y'), ('TAA', '*'), ('TAG', '*'), ('TGA', '*')
    ])
    def test_standard_table(self, text, amino):
        assert translate_codon(Codon.from_text(Nucleotide, text)).encode() == amino

    def test_stop_codons(self):
        assert GeneticCode.STANDARD.is_stop(Codon.from_text(Nucleotide, 'TGA'))
        assert not GeneticCode.STANDARD.is_stop(Codon.from_text(Nucleotide, 'TGG'))

    def test_untranslatable(self):
        with pytest.raises(UntranslatableCodonError) as exc:
            translate_codon(Codon.from_text(DegenerateNucleotide, 'ANG'))
        assert exc.value.codon == 'ANG'
        assert isinstance(exc.value, TranslationError)

    def test_untranslatable_amino_codon(self):
        with pytest.raises(UntranslatableCodonError):
            translate_codon(Codon.from_text(AminoAcid, 'MKE'))

    @pytest.mark.parametrize('text', ['ACG', 'TAA'])
    def test_amino_codon_spelling_a_triplet(self, text):
        codon = Codon.from_text(AminoAcid, text)
        with pytest.raises(UntranslatableCodonError) as exc:
            translate_codon(codon)
        assert exc.value.codon == text
        with pytest.raises(UntranslatableCodonError):
            GeneticCode.STANDARD.is_stop(codon)

    def test_keyed_on_text(self):
        assert translate_codon(Codon.from_text(DegenerateNucleotide, 'ATG')) is AminoAcid.M


class TestTranslate:
    def test_scenario(self):
        assert translate(Seq.decode(Nucleotide, 'AAAGTGACC')).encode() == 'KVT'

    @pytest.mark.parametrize('text', ['', 'A', 'AT'])
    def test_short_input_is_empty(self, text):
        protein = translate(Seq.decode(Nucleotide, text))
        assert protein == Seq(AminoAcid)
        assert protein.symbol_type is AminoAcid

    def test_trailing_bases_dropped(self):
        assert translate(Seq.decode(Nucleotide, 'AAAGTGACCGT')).encode() == 'KVT'

    def test_translates_through_stops(self):
        assert translate(Seq.decode(Nucleotide, 'ATGTAAGGG')).encode() == 'M*G'

    def test_source_unchanged(self):
        seq = Seq.decode(Nucleotide, 'AAAGTGACC')
        translate(seq)
        assert seq.encode() == 'AAAGTGACC'

    def test_reverse_complement_then_translate(self):
        assert translate(Seq.decode(Nucleotide, 'GGTCACTTT').reverse_complement()).encode() == 'KVT'

    def test_requires_nucleotides(self):
        with pytest.raises(AlphabetError):
            translate(Seq.decode(DegenerateNucleotide, 'ATG'))
        with pytest.raises(AlphabetError):
            translate(Seq.decode(AminoAcid, 'ATG'))


class TestThreeLetter:
    def test_render(self):
        assert to_three_letter(Seq.decode(AminoAcid, 'MK*')) == 'METLYS * '
        assert to_three_letter(Seq(AminoAcid)) == ''

    def test_parse(self):
        assert from_three_letter('METlys * ') == Seq.decode(AminoAcid, 'MK*')

    def test_roundtrip(self):
        protein = Seq.decode(AminoAcid, 'ACDEFGHIKLMNPQRSTVWY*')
        text = to_three_letter(protein)
        assert len(text) == 3 * len(protein)
        assert from_three_letter(text) == protein

    def test_short_trailing_chunk(self):
        with pytest.raises(InvalidSymbolError):
            from_three_letter('METLY')

    def test_requires_amino(self):
        with pytest.raises(AlphabetError):
            to_three_letter(Seq.decode(Nucleotide, 'ATG'))
