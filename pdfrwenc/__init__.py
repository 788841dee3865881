#!/usr/bin/env python3

from .common import *
from .pdfglyphlist import *
from .pdfencodingtables import *
from .pdfencodingregistry import *
from .pdftransform import *
from .pdffontencoding import *
