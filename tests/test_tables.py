"""
pdfrwenc test suite
tests for the predefined encoding tables
"""

import unittest

from pdfrwenc import PdfSimpleEncoding, PdfEncodingTables
from .base import BaseTester


class TestTables(BaseTester):
    """Test the static code -> rune tables."""

    def test_table_names(self):
        assert PdfEncodingTables.names() == [
            'MacExpertEncoding', 'MacRomanEncoding', 'PdfDocEncoding', 'StandardEncoding'
        ]

    def test_table_sizes(self):
        sizes = {name: len(PdfEncodingTables.get_table(name)) for name in PdfEncodingTables.names()}
        assert sizes == {
            'MacExpertEncoding': 165,
            'MacRomanEncoding': 255,
            'PdfDocEncoding': 252,
            'StandardEncoding': 149,
        }, sizes

    def test_unknown_table(self):
        assert PdfEncodingTables.get_table('BogusEncoding') is None

    def test_table_is_a_copy(self):
        table = PdfEncodingTables.get_table('StandardEncoding')
        table[0x41] = 0x42
        assert PdfEncodingTables.get_table('/StandardEncoding')[0x41] == 0x41

    def test_every_table_entry(self):
        for name in PdfEncodingTables.names():
            table = PdfEncodingTables.get_table(name)
            encoding = PdfSimpleEncoding.new_named(name)
            for code in range(256):
                rune, ok = encoding.charcode_to_rune(code)
                if code in table:
                    assert (rune, ok) == (table[code], True), (name, code)
                else:
                    assert not ok, (name, code)

    def test_macroman_adieresis(self):
        assert self.macRoman.charcode_to_rune(0x80) == (0x00C4, True)

    def test_standard_quoteright(self):
        assert self.standard.charcode_to_rune(0x27) == (0x2019, True)

    def test_standard_control_code_absent(self):
        assert self.standard.charcode_to_rune(0x01) == (0, False)

    def test_pdfdoc(self):
        pdfDoc = PdfSimpleEncoding.new_named('PdfDocEncoding')
        assert pdfDoc.charcode_to_rune(0x18) == (0x02D8, True)
        assert pdfDoc.charcode_to_rune(0xA0) == (0x20AC, True)

    def test_macexpert(self):
        macExpert = PdfSimpleEncoding.new_named('MacExpertEncoding')
        assert macExpert.charcode_to_rune(0x2F) == (0x2044, True)
        assert macExpert.charcode_to_rune(0x41) == (0, False)


class TestGlyphVectors(BaseTester):
    """Test the glyph-name based encodings."""

    def test_winansi(self):
        assert self.winAnsi.charcode_to_rune(0x41) == (0x41, True)
        assert self.winAnsi.charcode_to_rune(0x80) == (0x20AC, True)
        assert self.winAnsi.charcode_to_rune(0xE9) == (0xE9, True)
        assert self.winAnsi.charcode_to_rune(0x01) == (0, False)

    def test_winansi_bullet(self):
        # bullet is at 0x7F, 0x81, 0x8D... but encodes as 0x95
        assert self.winAnsi.charcode_to_rune(0x7F) == (0x2022, True)
        assert self.winAnsi.rune_to_charcode(0x2022) == (0x95, True)

    def test_winansi_bullet_survives_differences(self):
        encoding = PdfSimpleEncoding.new_named('WinAnsiEncoding', {0x41: 'B'})
        assert encoding.rune_to_charcode(0x2022) == (0x95, True)
        encoding = PdfSimpleEncoding.new_named('WinAnsiEncoding', {0x95: 'A'})
        assert encoding.rune_to_charcode(0x2022) == (0x7F, True)

    def test_symbol(self):
        symbol = PdfSimpleEncoding.new_named('SymbolEncoding')
        assert symbol.charcode_to_rune(0x41) == (0x0391, True)
        assert symbol.charcode_to_rune(0x61) == (0x03B1, True)
        assert symbol.charcode_to_rune(0x22) == (0x2200, True)

    def test_glyph_vector(self):
        vector = PdfEncodingTables.glyph_vector('WinAnsiEncoding')
        assert vector[0x20] == 'space'
        assert 0x00 not in vector
        assert PdfEncodingTables.glyph_vector('StandardEncoding') is None
