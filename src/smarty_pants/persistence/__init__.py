"""
Persistence Package

This package turns networks into bytes and back, and reads and writes them
from files.

Modules:
    codec: encode, decode, save and load

Exported Functions:
    encode: NeuralNetwork -> bytes
    decode: bytes -> NeuralNetwork
    save:   Write the encoding of a network to a file
    load:   Read a network from a file
"""

from smarty_pants.persistence.codec import decode, encode, load, save

__all__ = ['decode',
           'encode',
           'load',
           'save']
