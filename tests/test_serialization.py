"""
pdfrwenc test suite
tests for writing encodings as PDF objects and reading them back
"""

import unittest

from pdfrw import PdfName, PdfDict, PdfArray, PdfObject, IndirectPdfDict

from pdfrwenc import PdfSimpleEncoding, PdfEncodingError, UnsupportedEncodingError
from .base import BaseTester


class TestToPdfObject(BaseTester):
    """Test serializing encodings."""

    def test_intrinsic_names(self):
        assert self.macRoman.to_pdf_object() == PdfName('MacRomanEncoding')
        assert self.winAnsi.to_pdf_object() == '/WinAnsiEncoding'
        macExpert = PdfSimpleEncoding.new_named('MacExpertEncoding')
        assert macExpert.to_pdf_object() == '/MacExpertEncoding'

    def test_dictionary(self):
        obj = self.standard.to_pdf_object()
        assert isinstance(obj, IndirectPdfDict)
        assert obj.Type == '/Encoding'
        assert obj.BaseEncoding == '/StandardEncoding'
        assert list(obj.Differences) == []

    def test_differences(self):
        encoding = PdfSimpleEncoding.new_named('StandardEncoding', {0x42: 'C', 0x41: 'B', 0x50: 'Euro'})
        obj = encoding.to_pdf_object()
        assert list(obj.Differences) == [0x41, '/B', '/C', 0x50, '/Euro']

    def test_legacy_empty_differences(self):
        encoding = PdfSimpleEncoding.new_named('StandardEncoding', {0x41: 'B'})
        obj = encoding.to_pdf_object(withDifferences = False)
        assert obj.BaseEncoding == '/StandardEncoding'
        assert list(obj.Differences) == []

    def test_intrinsic_with_differences(self):
        encoding = PdfSimpleEncoding.new_named('MacRomanEncoding', {0x41: 'B'})
        obj = encoding.to_pdf_object()
        assert obj.BaseEncoding == '/MacRomanEncoding'
        assert list(obj.Differences) == [0x41, '/B']
        assert encoding.to_pdf_object(withDifferences = False) == '/MacRomanEncoding'

    def test_custom(self):
        encoding = PdfSimpleEncoding.new_custom({0x41: 'A', 0x42: 'B'}, {0x20: 'space'})
        obj = encoding.to_pdf_object()
        assert obj.BaseEncoding == '/custom'
        assert list(obj.Differences) == [0x20, '/space', 0x41, '/A', '/B']


class TestDifferencesArray(unittest.TestCase):
    """Test converting between /Differences arrays and code -> glyph maps."""

    def test_parse(self):
        differences = [32, '/space', '/exclam', '40', '/parenleft', '0x41', '/A']
        assert PdfSimpleEncoding.differences_to_cc2glyphname(differences) == {
            32: 'space', 33: 'exclam', 40: 'parenleft', 65: 'A'
        }

    def test_parse_pdf_tokens(self):
        differences = PdfArray([PdfObject('39'), PdfName('quotesingle'), PdfName('grave')])
        assert PdfSimpleEncoding.differences_to_cc2glyphname(differences) == {39: 'quotesingle', 40: 'grave'}

    def test_parse_malformed(self):
        for differences in (['/a', 'bogus'], [300, '/a'], [1, ''], [255, '/a', '/b']):
            with self.assertRaises(PdfEncodingError):
                PdfSimpleEncoding.differences_to_cc2glyphname(differences)

    def test_write(self):
        assert PdfSimpleEncoding.cc2glyphname_to_differences({}) == ([], None, None)
        diff, first, last = PdfSimpleEncoding.cc2glyphname_to_differences({5: 'c', 1: 'a', 2: '/b'})
        assert diff == [1, '/a', '/b', 5, '/c']
        assert (first, last) == (1, 5)

    def test_write_out_of_range(self):
        with self.assertRaises(ValueError):
            PdfSimpleEncoding.cc2glyphname_to_differences({256: 'a'})


class TestFromPdfObject(BaseTester):
    """Test building encodings from PDF objects."""

    def assert_same_mapping(self, a, b):
        assert [a.charcode_to_rune(c) for c in range(256)] == [b.charcode_to_rune(c) for c in range(256)]

    def test_name(self):
        encoding = PdfSimpleEncoding.from_pdf_object(PdfName('MacRomanEncoding'))
        assert encoding.base_name() == 'MacRomanEncoding'
        self.assert_same_mapping(encoding, self.macRoman)

    def test_round_trip(self):
        encoding = PdfSimpleEncoding.new_named('StandardEncoding', {0x27: 'quotesingle', 0x80: 'Euro'})
        back = PdfSimpleEncoding.from_pdf_object(encoding.to_pdf_object())
        assert back.base_name() == 'StandardEncoding'
        assert back.differences == encoding.differences
        self.assert_same_mapping(back, encoding)

    def test_custom_round_trip(self):
        encoding = PdfSimpleEncoding.new_custom({0x41: 'A', 0x42: 'B'})
        back = PdfSimpleEncoding.from_pdf_object(encoding.to_pdf_object())
        assert back.base_name() == 'custom'
        self.assert_same_mapping(back, encoding)

    def test_default_base(self):
        obj = PdfDict(Type = PdfName.Encoding, Differences = PdfArray([0x27, PdfName('quotesingle')]))
        encoding = PdfSimpleEncoding.from_pdf_object(obj)
        assert encoding.base_name() == 'StandardEncoding'
        assert encoding.charcode_to_rune(0x27) == (0x27, True)
        assert encoding.charcode_to_rune(0x60) == (0x60, True)
        encoding = PdfSimpleEncoding.from_pdf_object(obj, defaultBase = 'WinAnsiEncoding')
        assert encoding.charcode_to_rune(0x80) == (0x20AC, True)

    def test_unknown_base(self):
        obj = PdfDict(Type = PdfName.Encoding, BaseEncoding = PdfName('BogusEncoding'))
        with self.assertRaises(UnsupportedEncodingError):
            PdfSimpleEncoding.from_pdf_object(obj)

    def test_not_an_encoding(self):
        with self.assertRaises(PdfEncodingError):
            PdfSimpleEncoding.from_pdf_object(42)
