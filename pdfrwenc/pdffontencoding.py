#!/usr/bin/env python3

import string

from pdfrw import PdfDict, PdfName, PdfArray, IndirectPdfDict

from .common import warn, strip_slash, PdfEncodingError, EmptyEncodingError, UnsupportedEncodingError
from .pdfglyphlist import PdfGlyphList, MISSING_CODE_RUNE
from .pdfencodingtables import PdfEncodingTables
from .pdfencodingregistry import PdfEncodingRegistry
from .pdftransform import PdfSimpleDecoder, PdfSimpleEncoder, PdfTransform

# =========================================================================== class PdfSimpleEncoding

class PdfSimpleEncoding:
    '''
    A simple (single-byte) PDF font encoding: a map from character codes (ints 0..255) to Unicode
    points (runes, ints) together with the reverse map from runes to character codes.

    The reverse map is built by inverting the forward one; when several codes map to the same rune
    the lowest code wins. Instances are never modified after construction: applying /Differences
    creates a new instance, so encodings can be shared freely.

    Use PdfSimpleEncoding.new_named() or PdfSimpleEncoding.new_custom() to create an encoding;
    the constructor itself is a low-level function.
    '''

    # Encoding names that PDF consumers know natively: these are written out as bare names
    INTRINSIC = ['MacRomanEncoding', 'MacExpertEncoding', 'WinAnsiEncoding']

    CUSTOM = 'custom'

    # --------------------------------------------------------------------------- __init__()

    def __init__(self,
                 baseName:str,
                 decode:dict,
                 differences:dict = None,
                 encodeOverrides:dict = None):
        '''
        Creates an encoding named baseName from the decode map (code -> rune).
        The differences map (code -> glyph name) records the glyph overrides that were applied to obtain decode;
        it only affects the output of to_pdf_object(). The encodeOverrides map (rune -> code) pins the reverse
        mapping of some runes; an override is ignored unless decode maps the code to the rune.
        '''
        self._baseName = baseName
        self._decode = {PdfSimpleEncoding.to_code(cc):rune for cc,rune in decode.items()}
        self._differences = dict(differences) if differences != None else {}
        self._encodeOverrides = {rune:code for rune,code in (encodeOverrides or {}).items()
                                    if self._decode.get(code) == rune}
        self._encode = PdfSimpleEncoding.invert(self._decode) | self._encodeOverrides

    def invert(decode:dict):
        '''
        Returns the reverse (rune -> code) map of the decode (code -> rune) map.
        If several codes map to the same rune, the inverted map points to the lowest of them.
        '''
        inverted = {}
        for code in sorted(decode):
            inverted.setdefault(decode[code], code)
        return inverted

    def to_code(cc):
        '''
        Returns cc as an int character code. Accepts ints and chars (strings of length 1);
        raises ValueError if the result is not in the 0..255 range.
        '''
        code = ord(cc) if isinstance(cc, str) and len(cc) == 1 else int(cc)
        if not 0 <= code <= 255: raise ValueError(f'char code is not in the 0..255 range: {[cc]}')
        return code

    # --------------------------------------------------------------------------- construction

    def from_table(name:str, table:dict):
        '''
        Returns an encoding named name with the given code -> rune table.
        '''
        return PdfSimpleEncoding(strip_slash(name), table)

    def from_glyph_vector(name:str, encodeOverrides:dict = None):
        '''
        Returns an encoding built by resolving the standard glyph name vector PdfEncodingTables.glyphVectors[name].
        This is how the registered WinAnsiEncoding and SymbolEncoding are constructed.
        '''
        decode = {}
        for code, glyph in PdfEncodingTables.glyph_vector(name).items():
            rune, ok = PdfGlyphList.glyph_to_rune(glyph)
            if ok: decode[code] = rune
            else: warn(f'unknown glyph in {name}: {glyph}')
        return PdfSimpleEncoding(name, decode, encodeOverrides = encodeOverrides)

    def new_custom(table:dict, differences:dict = None):
        '''
        Returns an encoding based on the custom code -> glyph name table, with the differences
        (code -> glyph name) applied on top of it. The encoding's base name is 'custom'.
        Glyph names that cannot be mapped to Unicode are skipped with a warning.
        Raises EmptyEncodingError if table is empty.
        '''
        if not table: raise EmptyEncodingError('empty custom encoding')

        decode, resolved = {}, {}
        for cc, glyph in table.items():
            rune, ok = PdfGlyphList.glyph_to_rune(glyph)
            if not ok:
                warn(f'unknown glyph: {glyph}')
                continue
            code = PdfSimpleEncoding.to_code(cc)
            decode[code] = rune
            resolved[code] = strip_slash(str(glyph))

        # The whole custom table is kept as differences, since there is no base to persist it by name
        encoding = PdfSimpleEncoding(PdfSimpleEncoding.CUSTOM, decode, differences = resolved)
        if differences:
            encoding = PdfSimpleEncoding.apply_differences(encoding, differences)
        return encoding

    def new_named(baseName:str, differences:dict = None):
        '''
        Returns the encoding baseName (with or without the leading slash), with the differences (code -> glyph name)
        applied on top of it. Encodings registered in PdfEncodingRegistry take precedence over
        the predefined tables in PdfEncodingTables. Raises UnsupportedEncodingError if baseName is neither.
        '''
        baseName = strip_slash(str(baseName))
        constructor, ok = PdfEncodingRegistry.lookup(baseName)
        if ok:
            encoding = constructor()
        else:
            table = PdfEncodingTables.get_table(baseName)
            if table == None: raise UnsupportedEncodingError(f'unsupported font encoding: {baseName}')
            encoding = PdfSimpleEncoding.from_table(baseName, table)

        if differences:
            encoding = PdfSimpleEncoding.apply_differences(encoding, differences)
        return encoding

    # --------------------------------------------------------------------------- apply_differences()

    def apply_differences(base:'PdfSimpleEncoding', differences:dict):
        '''
        Returns a new encoding which is base with the codes in differences (code -> glyph name) remapped
        to the runes of the respective glyphs. Glyph names that cannot be mapped to Unicode are skipped
        with a warning, leaving the base mapping of the code as it is. The base name is kept and base is not modified.
        '''
        decode = dict(base._decode)
        applied = dict(base._differences)
        for cc, glyph in differences.items():
            rune, ok = PdfGlyphList.glyph_to_rune(glyph)
            if not ok:
                warn(f'unknown glyph in /Differences: {glyph}')
                continue
            code = PdfSimpleEncoding.to_code(cc)
            decode[code] = rune
            applied[code] = strip_slash(str(glyph))

        return PdfSimpleEncoding(base._baseName, decode,
                                 differences = applied,
                                 encodeOverrides = base._encodeOverrides)

    # --------------------------------------------------------------------------- accessors

    def charcode_to_rune(self, code:int):
        '''
        Returns (rune, True) for a mapped code. Returns (0, False) for an unmapped code
        and (MISSING_CODE_RUNE, False) for a code outside of the 0..255 range.
        '''
        if not 0 <= code <= 0xFF: return MISSING_CODE_RUNE, False
        rune = self._decode.get(code)
        return (rune, True) if rune != None else (0, False)

    def rune_to_charcode(self, rune:int):
        '''Returns (code, True) for a rune that the encoding can represent, or (0, False) otherwise'''
        code = self._encode.get(rune)
        return (code, True) if code != None else (0, False)

    def charcode_to_glyph(self, code:int):
        '''Returns (glyphName, True) for the code, or ('', False) if either the code or its rune cannot be mapped'''
        rune, ok = self.charcode_to_rune(code)
        if not ok: return '', False
        return self.rune_to_glyph(rune)

    def glyph_to_charcode(self, glyph:str):
        '''Returns (code, True) for the glyph name, or (0, False) if either the glyph or its rune cannot be mapped'''
        rune, ok = self.glyph_to_rune(glyph)
        if not ok: return 0, False
        return self.rune_to_charcode(rune)

    def rune_to_glyph(self, rune:int):
        return PdfGlyphList.rune_to_glyph(rune)

    def glyph_to_rune(self, glyph:str):
        return PdfGlyphList.glyph_to_rune(glyph)

    def charcodes(self):
        '''Returns the list of all mapped codes in ascending order'''
        return sorted(self._decode)

    def base_name(self):
        return self._baseName

    @property
    def differences(self):
        '''A copy of the code -> glyph name overrides this encoding carries, see __init__()'''
        return dict(self._differences)

    def __str__(self):
        return f'simpleEncoding({self._baseName})'

    def __repr__(self):
        return f'<PdfSimpleEncoding {self._baseName}: {len(self._decode)} codes>'

    # --------------------------------------------------------------------------- text conversion

    def new_decoder(self):
        return PdfSimpleDecoder(self)

    def new_encoder(self):
        return PdfSimpleEncoder(self)

    def encode(self, text:str):
        '''Returns the character codes for text as bytes; runes the encoding lacks become the code of /.notdef, or 0'''
        return PdfTransform.apply(self.new_encoder(), PdfTransform.to_utf8(text))

    def decode(self, data:bytes):
        '''Returns the text for the character codes in data; unmapped codes become MISSING_CODE_RUNE'''
        return PdfTransform.apply(self.new_decoder(), data).decode('utf-8')

    # --------------------------------------------------------------------------- to_pdf_object()

    def to_pdf_object(self, withDifferences:bool = True):
        '''
        Returns the PDF representation of the encoding: a bare name (PdfName) if the encoding is
        one of the PdfSimpleEncoding.INTRINSIC encodings without differences, or an /Encoding dictionary
        (IndirectPdfDict) otherwise.

        The /Differences array of the dictionary lists the glyph overrides the encoding carries. With
        withDifferences == False an empty /Differences array is written instead, as older versions did.
        '''
        if self._baseName in PdfSimpleEncoding.INTRINSIC and not (withDifferences and self._differences):
            return PdfName(self._baseName)

        diffs = PdfSimpleEncoding.cc2glyphname_to_differences(self._differences)[0] if withDifferences else []
        return IndirectPdfDict(
            Type = PdfName.Encoding,
            BaseEncoding = PdfName(self._baseName),
            Differences = PdfArray(diffs)
        )

    # --------------------------------------------------------------------------- from_pdf_object()

    def from_pdf_object(obj, defaultBase:str = 'StandardEncoding'):
        '''
        Creates an encoding from its PDF representation: an encoding name or an /Encoding dictionary.
        A dictionary with no /BaseEncoding is taken to describe differences from defaultBase;
        a dictionary with /BaseEncoding /custom is rebuilt with new_custom() from its /Differences.
        '''
        if isinstance(obj, PdfDict):
            differences = PdfSimpleEncoding.differences_to_cc2glyphname(obj.Differences) \
                            if obj.Differences != None else {}
            base = obj.BaseEncoding
            if base != None and strip_slash(base) == PdfSimpleEncoding.CUSTOM:
                return PdfSimpleEncoding.new_custom(differences)
            return PdfSimpleEncoding.new_named(base if base != None else defaultBase, differences)

        if isinstance(obj, str) and obj[:1] == '/':
            return PdfSimpleEncoding.new_named(obj)

        raise PdfEncodingError(f'not an encoding name or dictionary: {obj}')

    # --------------------------------------------------------------------------- /Differences

    def differences_to_cc2glyphname(differences:list):
        '''
        Converts an encoding /Differences list to a dictionary that maps codes (ints) to glyph names (without slash).
        '''
        i = 0
        encMap = {}
        for d in differences:
            if d == '': raise PdfEncodingError(f'empty string in /Differences: {differences}')
            if isinstance(d,int):
                i = d
            elif all(c in string.digits for c in d):
                i = int(d)
            elif d[:2] == '0x' and len(d) > 2 and all(c in string.hexdigits for c in d[2:]):
                i = int(d,0)
            elif d[0] == '/' and len(d)>1:
                if not 0 <= i <= 255: raise PdfEncodingError(f'index out of range in /Differences: {differences}')
                encMap[i] = str(d[1:])
                i += 1
            else:
                raise PdfEncodingError(f'a token in /Differences is not a glyph or a number: {d}; full /Differences follow:\n{differences}')

        return encMap

    def cc2glyphname_to_differences(cc2gname:dict):
        '''
        Encodes a code -> glyph name map as an encoding /Differences list: each run of consecutive codes
        is written as the first code followed by the glyph names (PdfName) of the codes of the run.
        Returns a tuple: (differencesList, firstChar, lastChar); firstChar and lastChar are None if the map is empty.
        '''
        code2gname = {PdfSimpleEncoding.to_code(cc):strip_slash(str(g)) for cc,g in cc2gname.items()}
        i = -1000
        firstChar, lastChar = None, None
        diff = []
        for code in sorted(code2gname):
            i += 1
            if code != i:
                i = code
                diff.append(i)
                if firstChar == None: firstChar = i
            diff.append(PdfName(code2gname[code]))
            lastChar = i
        return diff, firstChar, lastChar

# =========================================================================== built-in registrations

# PDF Reference 1.7 Appendix D, note 6: in WinAnsiEncoding, the bullet glyph is encoded as 0x95
PdfEncodingRegistry.register('WinAnsiEncoding',
    lambda: PdfSimpleEncoding.from_glyph_vector('WinAnsiEncoding', encodeOverrides = {0x2022: 0x95}))

PdfEncodingRegistry.register('SymbolEncoding',
    lambda: PdfSimpleEncoding.from_glyph_vector('SymbolEncoding'))
