#!/usr/bin/env python3

from typing import Callable

from .common import err, strip_slash

# =========================================================================== class PdfEncodingRegistry

class PdfEncodingRegistry:
    '''
    The process-wide table of named simple encoding constructors. A constructor is a callable
    that takes no arguments and returns a new PdfSimpleEncoding.

    All registrations are expected to happen at startup (normally at import time), before the
    registry is shared between threads; lookups after that need no locking since nothing is
    ever removed or replaced.
    '''

    constructors = {}

    def register(name:str, constructor:Callable):
        '''
        Registers the constructor under the encoding name (with or without the leading slash).
        Registering the same name twice is a programming error: the process exits.
        '''
        name = strip_slash(name)
        if name in PdfEncodingRegistry.constructors:
            err(f'encoding already registered: {name}')
        PdfEncodingRegistry.constructors[name] = constructor

    def lookup(name:str):
        '''
        Returns (constructor, True) if an encoding named name is registered, or (None, False) otherwise.
        '''
        constructor = PdfEncodingRegistry.constructors.get(strip_slash(name))
        return constructor, constructor != None

    def names():
        '''Returns the sorted list of the registered encoding names'''
        return sorted(PdfEncodingRegistry.constructors)
