#!/usr/bin/env python3

import re

try:
    from fontTools import agl
except ImportError:
    raise SystemError(f'import fonttools failed; run: pip3 install fonttools')

from .common import err, msg, warn, strip_slash

# The rune that stands for 'no character': the decode fallback and the rune of the /.notdef glyph
MISSING_CODE_RUNE = 0xFFFD

def _legacy_rune2glyph():
    '''Inverts the legacy AGL, keeping the alphabetically first name for every rune'''
    m = {}
    for name, uvs in sorted(agl.LEGACY_AGL2UV.items()):
        if len(uvs) == 1: m.setdefault(uvs[0], name)
    return m

# =========================================================================== class PdfGlyphList

class PdfGlyphList:
    '''
    The glyph name <-> Unicode point dictionary based on the Adobe Glyph Lists
    (https://github.com/adobe-type-tools/agl-aglfn) as shipped with fontTools (`fontTools.agl`).

    Name to rune lookups prefer the AGLFN (the names recommended for new fonts), then fall back on
    the legacy AGL and the `uniXXXX`/`uXXXX[XX]` naming conventions. Rune to name lookups
    prefer AGLFN names; runes that are only in the legacy AGL map to the alphabetically first legacy name.

    Additional glyph lists in the AGL format can be added with read_glyph_list();
    these take precedence over the standard lists.
    '''

    glyph2rune = {} # names added from extra glyph lists
    rune2glyph = {}

    legacyRune2glyph = _legacy_rune2glyph()

    # --------------------------------------------------------------------------- glyph_to_rune()

    def glyph_to_rune(glyph:str):
        '''
        Returns (rune, True) where rune is the Unicode point (int) of the glyph name,
        or (0, False) if the glyph name cannot be mapped to a single Unicode point.
        The glyph name can be given with or without the leading slash.
        '''
        if not glyph: return 0, False
        glyph = strip_slash(str(glyph))
        if glyph == '.notdef': return MISSING_CODE_RUNE, True

        if glyph in PdfGlyphList.glyph2rune: return PdfGlyphList.glyph2rune[glyph], True
        if glyph in agl.AGL2UV: return agl.AGL2UV[glyph], True

        u = agl.toUnicode(glyph)
        if len(u) != 1: return 0, False
        r = ord(u)
        if 0xD800 <= r <= 0xDFFF: return 0, False
        return r, True

    # --------------------------------------------------------------------------- rune_to_glyph()

    def rune_to_glyph(rune:int):
        '''
        Returns (glyphName, True) for the rune, or ('', False) if the rune has no standard glyph name.
        '''
        if rune == MISSING_CODE_RUNE: return '.notdef', True
        for m in (PdfGlyphList.rune2glyph, agl.UV2AGL, PdfGlyphList.legacyRune2glyph):
            if rune in m: return m[rune], True
        return '', False

    # --------------------------------------------------------------------------- read_glyph_list()

    def read_glyph_list(path:str):
        '''
        Adds the glyph names from the glyph list file at path to the dictionary.
        The file should be in the Adobe Glyph List (AGL) format: lines of the form `glyphName;XXXX`,
        with comment lines starting with '#'. Lines that map a name to a sequence of Unicode points
        are skipped since a simple encoding maps a code to a single rune.

        Call this at startup, before the dictionary is used concurrently.
        '''
        count = 0
        with open(path, 'r') as file:
            for k,line in enumerate(file):
                s = line.strip(' \t\r\n')
                if s == '' or s[0] == '#': continue
                try: glyphName, codePointHex = re.split(';',s)
                except ValueError: err(f'malformed line # {k} in a glyph list: {path}')
                codePointHex = codePointHex.strip()
                if not re.fullmatch(r'[0-9a-fA-F]{4,6}( [0-9a-fA-F]{4,6})*', codePointHex):
                    err(f'malformed line # {k} in a glyph list: {path}')
                if ' ' in codePointHex:
                    warn(f'skipping a multi-rune glyph in a glyph list: {glyphName}')
                    continue
                rune = int(codePointHex, 16)
                PdfGlyphList.glyph2rune[glyphName] = rune
                PdfGlyphList.rune2glyph.setdefault(rune, glyphName)
                count += 1
        msg(f'{count} glyph names read from {path}')
