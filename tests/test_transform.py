"""
pdfrwenc test suite
tests for the chunked encode/decode transforms and the codecs glue
"""

import io
import codecs
import unittest

from pdfrwenc import (
    PdfSimpleEncoding, PdfSimpleDecoder, PdfSimpleEncoder, PdfTransform, TransformSignal,
    full_rune, decode_rune, MISSING_CODE_RUNE,
)
from .base import BaseTester, transform_in_chunks


# text with 1-, 2-, 3- and 4-byte UTF-8 runes, some of which MacRoman lacks
SAMPLE = 'Ärger über Öl – “quoted” … © 中 😀 end'


class TestDecode(BaseTester):
    """Test the bytes -> text transform."""

    def test_short_dst(self):
        decoder = PdfSimpleDecoder(self.macRoman)
        dst = bytearray(1)
        assert decoder.transform(dst, b'\x80\x81', False) == (0, 0, TransformSignal.SHORT_DST)
        dst = bytearray(4)
        assert decoder.transform(dst, b'\x80\x81', False) == (4, 2, TransformSignal.DONE)
        assert dst.decode('utf-8') == 'ÄÅ'

    def test_short_dst_after_progress(self):
        decoder = PdfSimpleDecoder(self.macRoman)
        dst = bytearray(3)
        assert decoder.transform(dst, b'\x80\x81', True) == (2, 1, TransformSignal.SHORT_DST)
        assert dst[:2].decode('utf-8') == 'Ä'

    def test_empty(self):
        decoder = PdfSimpleDecoder(self.macRoman)
        assert decoder.transform(bytearray(0), b'', True) == (0, 0, TransformSignal.DONE)

    def test_unmapped_code(self):
        decoder = PdfSimpleDecoder(self.standard)
        dst = bytearray(8)
        assert decoder.transform(dst, b'\x01A', True) == (4, 2, TransformSignal.DONE)
        assert dst[:4].decode('utf-8') == '\ufffdA'

    def test_every_byte(self):
        for encoding in (self.standard, self.macRoman, self.winAnsi):
            text = encoding.decode(bytes(range(256)))
            assert len(text) == 256

    def test_memoryview_dst(self):
        buf = bytearray(b'xx' + bytes(4))
        decoder = PdfSimpleDecoder(self.macRoman)
        assert decoder.transform(memoryview(buf)[2:], b'\x80A', True) == (3, 2, TransformSignal.DONE)
        assert buf == b'xx' + 'ÄA'.encode('utf-8') + b'\x00'

    def test_chunking(self):
        data = bytes(range(256)) * 2
        decoder = PdfSimpleDecoder(self.macRoman)
        whole = PdfTransform.apply(decoder, data)
        for chunkSize in (1, 2, 3, 7, 64):
            for dstSize in (3, 4, 5, 16):
                assert transform_in_chunks(decoder, data, chunkSize, dstSize) == whole, (chunkSize, dstSize)


class TestEncode(BaseTester):
    """Test the text -> bytes transform."""

    def test_short_src(self):
        encoder = PdfSimpleEncoder(self.macRoman)
        src = 'Ä'.encode('utf-8')
        dst = bytearray(4)
        assert encoder.transform(dst, src[:1], False) == (0, 0, TransformSignal.SHORT_SRC)
        assert encoder.transform(dst, b'A' + src[:1], False) == (1, 1, TransformSignal.SHORT_SRC)
        assert encoder.transform(dst, src, False) == (1, 2, TransformSignal.DONE)
        assert dst[0] == 0x80

    def test_truncated_at_eof(self):
        encoder = PdfSimpleEncoder(self.macRoman)
        dst = bytearray(4)
        assert encoder.transform(dst, '€'.encode('utf-8')[:2], True) == (2, 2, TransformSignal.DONE)
        assert dst[:2] == b'\x00\x00'

    def test_short_dst(self):
        encoder = PdfSimpleEncoder(self.macRoman)
        assert encoder.transform(bytearray(0), b'A', False) == (0, 0, TransformSignal.SHORT_DST)
        dst = bytearray(1)
        assert encoder.transform(dst, 'AÄ'.encode('utf-8'), False) == (1, 1, TransformSignal.SHORT_DST)
        assert dst == b'A'

    def test_invalid_utf8(self):
        encoder = PdfSimpleEncoder(self.macRoman)
        dst = bytearray(8)
        assert encoder.transform(dst, b'A\xffB\xed\xa0\x80', True) == (6, 6, TransformSignal.DONE)
        assert dst[:6] == b'A\x00B\x00\x00\x00'

    def test_missing_code(self):
        encoding = PdfSimpleEncoding.new_named('StandardEncoding', {0x00: '.notdef'})
        encoder = PdfSimpleEncoder(encoding)
        dst = bytearray(4)
        assert encoder.transform(dst, 'A中ÿ'.encode('utf-8') + b'\xff', True) == (4, 7, TransformSignal.DONE)
        assert dst == b'A\x00\x00\x00'
        encoding = PdfSimpleEncoding.new_custom({0x41: 'A', 0x3F: '.notdef'})
        assert PdfTransform.apply(PdfSimpleEncoder(encoding), 'A中'.encode('utf-8')) == b'A?'

    def test_round_trip(self):
        text = 'Ärger über Öl – “quoted” … ©'
        assert self.macRoman.decode(self.macRoman.encode(text)) == text

    def test_chunking(self):
        data = SAMPLE.encode('utf-8') + b'\xff\xe2\x82A' + '😀'.encode('utf-8')[:3]
        encoder = PdfSimpleEncoder(self.macRoman)
        whole = PdfTransform.apply(encoder, data)
        assert len(whole) == len(SAMPLE) + 7
        for chunkSize in (1, 2, 3, 5, 64):
            for dstSize in (3, 4, 16):
                assert transform_in_chunks(encoder, data, chunkSize, dstSize) == whole, (chunkSize, dstSize)


class TestUTF8(unittest.TestCase):
    """Test the UTF-8 rune helpers."""

    def test_full_rune(self):
        assert not full_rune(b'')
        assert full_rune(b'A')
        assert not full_rune(b'\xc3')
        assert full_rune(b'\xc3\x84')
        assert not full_rune(b'\xe2\x82')
        assert full_rune(b'\xff')
        assert full_rune(b'\xe0\x80')
        assert full_rune(b'\xe2\x82A')

    def test_decode_rune(self):
        assert decode_rune(b'A') == (0x41, 1)
        assert decode_rune('€'.encode('utf-8')) == (0x20AC, 3)
        assert decode_rune('😀'.encode('utf-8')) == (0x1F600, 4)
        assert decode_rune(b'\xe2\x82') == (MISSING_CODE_RUNE, 1)
        assert decode_rune(b'\xc0\x80') == (MISSING_CODE_RUNE, 1)


class TestDriver(BaseTester):
    """Test the whole-buffer driver."""

    def test_grows_output(self):
        data = b'\x80' * 1000
        out = PdfTransform.apply(PdfSimpleDecoder(self.macRoman), data)
        assert out.decode('utf-8') == 'Ä' * 1000

    def test_transform_chunk_keeps_tail(self):
        data = 'AÄ'.encode('utf-8')
        out, n = PdfTransform.transform_chunk(PdfSimpleEncoder(self.macRoman), data[:2], False)
        assert (out, n) == (b'A', 1)


class TestCodec(BaseTester):
    """Test the codecs glue."""

    @classmethod
    def setUpClass(cls):
        PdfTransform.register_codec(cls.macRoman, 'pdf-macroman-test')

    def test_lookup(self):
        assert codecs.lookup('pdf-macroman-test').name == 'pdf-macroman-test'

    def test_str_bytes(self):
        assert 'ÄÅ'.encode('pdf-macroman-test') == b'\x80\x81'
        assert b'\x80\x81'.decode('pdf_macroman_test') == 'ÄÅ'

    def test_incremental(self):
        encoder = codecs.getincrementalencoder('pdf-macroman-test')()
        assert encoder.encode('Ä') + encoder.encode('Å', final=True) == b'\x80\x81'
        decoder = codecs.getincrementaldecoder('pdf-macroman-test')()
        assert decoder.decode(b'\x80') + decoder.decode(b'\x81', final=True) == 'ÄÅ'

    def test_streams(self):
        reader = codecs.getreader('pdf-macroman-test')(io.BytesIO(b'\x80\x81'))
        assert reader.read() == 'ÄÅ'
        buf = io.BytesIO()
        writer = codecs.getwriter('pdf-macroman-test')(buf)
        writer.write('ÄÅ')
        assert buf.getvalue() == b'\x80\x81'

    def test_text_io(self):
        stream = io.TextIOWrapper(io.BytesIO(b'\x80\x81\n'), encoding='pdf-macroman-test')
        assert stream.read() == 'ÄÅ\n'
