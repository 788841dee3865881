#!/usr/bin/env python3

import codecs, re
from enum import Enum

from .pdfglyphlist import MISSING_CODE_RUNE

# =========================================================================== class TransformSignal

class TransformSignal(Enum):
    '''
    The outcome of a single transform() call:

    * DONE: all of src has been consumed;
    * SHORT_SRC: src ends with an incomplete UTF-8 sequence; call again with more source bytes appended;
    * SHORT_DST: dst has no room for the next output; call again with a larger (or a fresh) dst.
    '''
    DONE = 0
    SHORT_SRC = 1
    SHORT_DST = 2

# =========================================================================== UTF-8 runes

# Allowed range of the 2nd byte of a multi-byte sequence, by the lead byte; the rest are 0x80..0xBF
_SECOND_BYTE = {0xE0: (0xA0, 0xBF), 0xED: (0x80, 0x9F), 0xF0: (0x90, 0xBF), 0xF4: (0x80, 0x8F)}

_SURROGATES = re.compile('[\ud800-\udfff]')

def sequence_length(lead:int):
    '''Returns the length of the UTF-8 sequence that starts with the lead byte; 1 for ASCII and invalid leads'''
    return 1 if lead < 0xC2 else 2 if lead < 0xE0 else 3 if lead < 0xF0 else 4 if lead < 0xF5 else 1

def full_rune(src):
    '''
    Returns True if src starts with a complete UTF-8 sequence or with bytes that can never become one
    (these decode as an invalid rune of length 1); returns False if more bytes are needed to tell.
    '''
    if len(src) == 0: return False
    if len(src) >= sequence_length(src[0]): return True
    lo, hi = _SECOND_BYTE.get(src[0], (0x80, 0xBF))
    if len(src) > 1 and not lo <= src[1] <= hi: return True
    if len(src) > 2 and not 0x80 <= src[2] <= 0xBF: return True
    return False

def decode_rune(src):
    '''
    Returns (rune, size) for the first UTF-8 sequence in src (which should not be empty).
    Invalid or truncated sequences give (MISSING_CODE_RUNE, 1).
    '''
    n = sequence_length(src[0])
    try:
        return ord(bytes(src[:n]).decode('utf-8')), n
    except UnicodeDecodeError:
        return MISSING_CODE_RUNE, 1

def encode_rune(rune:int):
    '''Returns the UTF-8 bytes of rune; runes that are not Unicode scalar values are encoded as MISSING_CODE_RUNE'''
    if not 0 <= rune <= 0x10FFFF or 0xD800 <= rune <= 0xDFFF: rune = MISSING_CODE_RUNE
    return chr(rune).encode('utf-8')

# =========================================================================== class PdfSimpleDecoder

class PdfSimpleDecoder:
    '''
    Transforms character codes of a simple encoding into UTF-8 text, one byte at a time.
    Codes that the encoding does not map are decoded as MISSING_CODE_RUNE.
    '''

    def __init__(self, encoding):
        self.encoding = encoding
        utf8 = []
        for code in range(256):
            rune, ok = encoding.charcode_to_rune(code)
            utf8.append(encode_rune(rune if ok else MISSING_CODE_RUNE))
        self.utf8 = tuple(utf8)

    def transform(self, dst, src, atEOF:bool = False):
        '''
        Decodes the bytes of src into dst (a bytearray or a writable memoryview; its length is the room available).
        Returns (nDst, nSrc, signal): the number of bytes written to dst, the number of bytes consumed from src
        and a TransformSignal. A code whose UTF-8 form does not fit into what is left of dst is not consumed,
        and SHORT_DST is returned. The decoder keeps no state between calls.
        '''
        nDst, nSrc = 0, 0
        for b in src:
            u = self.utf8[b]
            if len(u) > len(dst) - nDst:
                return nDst, nSrc, TransformSignal.SHORT_DST
            dst[nDst:nDst + len(u)] = u
            nDst += len(u)
            nSrc += 1
        return nDst, nSrc, TransformSignal.DONE

    def reset(self):
        pass

# =========================================================================== class PdfSimpleEncoder

class PdfSimpleEncoder:
    '''
    Transforms UTF-8 text into character codes of a simple encoding, one byte per rune.
    Invalid UTF-8 is taken for MISSING_CODE_RUNE; runes that the encoding cannot represent are
    encoded as the code of MISSING_CODE_RUNE if the encoding has one, or as 0 otherwise.
    '''

    def __init__(self, encoding):
        self.encoding = encoding
        self.missingCode = encoding.rune_to_charcode(MISSING_CODE_RUNE)[0]

    def transform(self, dst, src, atEOF:bool = False):
        '''
        Encodes the UTF-8 bytes of src into dst (a bytearray or a writable memoryview).
        Returns (nDst, nSrc, signal) as PdfSimpleDecoder.transform() does. If src ends with an incomplete
        UTF-8 sequence and atEOF is False, the sequence is not consumed and SHORT_SRC is returned;
        with atEOF set, its bytes are encoded as invalid input.
        '''
        src = memoryview(src)
        nDst, nSrc = 0, 0
        while nSrc < len(src):
            head = src[nSrc:nSrc + 4]
            if not atEOF and not full_rune(head):
                return nDst, nSrc, TransformSignal.SHORT_SRC
            if nDst >= len(dst):
                return nDst, nSrc, TransformSignal.SHORT_DST
            rune, n = decode_rune(head)
            code, ok = self.encoding.rune_to_charcode(rune)
            dst[nDst] = code if ok else self.missingCode
            nDst += 1
            nSrc += n
        return nDst, nSrc, TransformSignal.DONE

    def reset(self):
        pass

# =========================================================================== class PdfTransform

class PdfTransform:
    '''
    Drivers for the simple encoding transformers: whole-buffer conversion and the Python codecs glue.
    '''

    def transform_chunk(transformer, src, atEOF:bool = True):
        '''
        Runs transformer over src, growing the output buffer as needed. Returns (output, nSrc), where nSrc
        is the number of bytes of src consumed; with atEOF == False the unconsumed tail is an incomplete
        UTF-8 sequence that should be prepended to the next chunk.
        '''
        src = memoryview(src)
        out = bytearray()
        size = max(len(src), 16)
        consumed = 0
        while True:
            buf = bytearray(size)
            nDst, nSrc, signal = transformer.transform(buf, src[consumed:], atEOF)
            out += buf[:nDst]
            consumed += nSrc
            if signal != TransformSignal.SHORT_DST: break
            if nDst == 0: size *= 2
        if signal == TransformSignal.SHORT_SRC and atEOF:
            raise ValueError(f'transformer asked for more input at EOF: {transformer}')
        return bytes(out), consumed

    def apply(transformer, src):
        '''Returns the result of running transformer over the whole of src'''
        return PdfTransform.transform_chunk(transformer, src, True)[0]

    def to_utf8(text:str):
        '''Encodes text as UTF-8; lone surrogates (which have no UTF-8 form) become MISSING_CODE_RUNE'''
        try:
            return text.encode('utf-8')
        except UnicodeEncodeError:
            return _SURROGATES.sub(chr(MISSING_CODE_RUNE), text).encode('utf-8')

    # --------------------------------------------------------------------------- codec_info()

    def codec_info(encoding, name:str):
        '''
        Returns a codecs.CodecInfo that converts between str and the character codes of encoding
        (a PdfSimpleEncoding). The conversion never fails, so the errors argument is ignored.
        '''
        decoder, encoder = PdfSimpleDecoder(encoding), PdfSimpleEncoder(encoding)

        def encode(input, errors = 'strict'):
            return PdfTransform.apply(encoder, PdfTransform.to_utf8(input)), len(input)

        def decode(input, errors = 'strict'):
            return PdfTransform.apply(decoder, input).decode('utf-8'), len(input)

        class IncrementalEncoder(PdfIncrementalEncoder): transformer = encoder
        class IncrementalDecoder(PdfIncrementalDecoder): transformer = decoder

        class StreamWriter(codecs.StreamWriter):
            def encode(self, input, errors = 'strict'): return encode(input, errors)

        class StreamReader(codecs.StreamReader):
            def decode(self, input, errors = 'strict'): return decode(input, errors)

        return codecs.CodecInfo(
            name = name,
            encode = encode,
            decode = decode,
            incrementalencoder = IncrementalEncoder,
            incrementaldecoder = IncrementalDecoder,
            streamwriter = StreamWriter,
            streamreader = StreamReader,
        )

    def register_codec(encoding, name:str):
        '''
        Makes encoding available to the codecs machinery (codecs.lookup(), str.encode(), open() etc.) under name.
        Returns the registered CodecInfo.
        '''
        normalize = lambda s: re.sub(r'[-\s]', '_', s.lower())
        info = PdfTransform.codec_info(encoding, name)
        key = normalize(name)
        codecs.register(lambda s: info if normalize(s) == key else None)
        return info

# =========================================================================== incremental codecs

class PdfIncrementalEncoder(codecs.IncrementalEncoder):
    '''Encodes str in chunks; the transformer class attribute is set by PdfTransform.codec_info()'''

    transformer = None

    def encode(self, input, final = False):
        return PdfTransform.transform_chunk(self.transformer, PdfTransform.to_utf8(input), True)[0]

class PdfIncrementalDecoder(codecs.IncrementalDecoder):
    '''Decodes bytes in chunks; the transformer class attribute is set by PdfTransform.codec_info()'''

    transformer = None

    def __init__(self, errors = 'strict'):
        super().__init__(errors)
        self.pending = b''

    def decode(self, input, final = False):
        data = self.pending + bytes(input)
        out, n = PdfTransform.transform_chunk(self.transformer, data, final)
        self.pending = data[n:]
        return out.decode('utf-8')

    def reset(self):
        self.pending = b''

    def getstate(self):
        return self.pending, 0

    def setstate(self, state):
        self.pending = state[0]
