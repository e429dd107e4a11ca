"""ASCII and binary grid file formats."""

from .ascii_format import dumps_ascii, loads_ascii, save_ascii, load_ascii
from .binary_format import encode_binary, decode_binary, save_binary, load_binary

__all__ = [
    'dumps_ascii',
    'loads_ascii',
    'save_ascii',
    'load_ascii',
    'encode_binary',
    'decode_binary',
    'save_binary',
    'load_binary',
]
