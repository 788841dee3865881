#!/usr/bin/env python3

import inspect, sys
from types import SimpleNamespace

# ========================================================= OPTIONS

# Process-level settings; set options.quiet = True to silence warn() and msg()
options = SimpleNamespace(quiet = False)

# ========================================================= MESSAGES

def eprint(*args, **kwargs):
    print(*args, file=sys.stderr, **kwargs)

def _caller(depth:int = 2):
    '''Returns (class name, function name, line number) of the caller of the caller of this function'''
    frame = inspect.stack()[depth][0]
    the_class = frame.f_locals["self"].__class__.__name__ if "self" in frame.f_locals \
        else frame.f_locals["cls"].__name__ if "cls" in frame.f_locals \
        else 'global'
    return the_class, frame.f_code.co_name, frame.f_lineno

def err(msg):
    '''Prints an error message in the form: 'Error in class.func(), line: msg',
    where class.func() are the class and the function that called err().
    Exits by sys.exit(1) afterwords'''
    the_class, the_func, lineno = _caller()
    eprint(f'{the_class}.{the_func}(): error in line {lineno}: {msg}')
    sys.exit(1)

def msg(msg):
    '''Prints a message in the form: 'func(): msg', where func() is the function that called msg().'''
    if options.quiet: return
    the_class, the_func, _ = _caller()
    eprint(f'{the_class}.{the_func}(): {msg}')

def warn(msg):
    '''Prints a warning message in the form: 'func(): warning: msg', where func() is the function that called warn().'''
    if options.quiet: return
    the_class, the_func, _ = _caller()
    eprint(f'{the_class}.{the_func}(): warning: {msg}')

# ========================================================= EXCEPTIONS

class PdfEncodingError(ValueError):
    '''Base class for the recoverable errors raised when building an encoding'''

class EmptyEncodingError(PdfEncodingError):
    '''Raised when a custom encoding is built from an empty code -> glyph table'''

class UnsupportedEncodingError(PdfEncodingError):
    '''Raised when a base encoding name is neither registered nor predefined'''

# ========================================================= NAMES

def strip_slash(name:str):
    '''
    Returns name without the leading slash; PdfName('x') == '/x', so this lets the
    callers use plain strings and PdfNames interchangeably.
    '''
    return name[1:] if name[:1] == '/' else name
