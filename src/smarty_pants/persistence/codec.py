"""
Codec Module

This module encodes the complete weight state of a NeuralNetwork as bytes and
decodes it back, bit for bit.

Layout (all integers are little-endian u64, all floats little-endian f64):

    num_layers
    for each hidden layer:
        width
        width x (scratch, weight)    scratch is written as 0.0, ignored on read
    num_outputs
    num_outputs x weight

This is the bincode 1.x default encoding of a list of lists of float pairs
followed by a list of floats, so files written by bincode-based tools holding
that structure can be read as well. There is no header and no version tag.

Functions:
    encode: NeuralNetwork -> bytes
    decode: bytes -> NeuralNetwork
    save:   Write the encoding of a network to a file
    load:   Read a network from a file
"""

import struct
import numpy as np
from pathlib import Path

from smarty_pants.network import DecodeError, NeuralNetwork

_U64 = struct.Struct('<Q')
_F64 = np.dtype('<f8')

class _Reader:
    """Sequential reader over a byte string that raises DecodeError on truncation."""

    def __init__(self, data: bytes):
        self._data   = data
        self._offset = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def read_length(self) -> int:
        if self.remaining < _U64.size:
            raise DecodeError(f"truncated data: expected a length at byte {self._offset}")
        (value,) = _U64.unpack_from(self._data, self._offset)
        self._offset += _U64.size
        return value

    def read_floats(self, count: int) -> np.ndarray:
        num_bytes = count * _F64.itemsize
        if self.remaining < num_bytes:
            raise DecodeError(f"truncated data: expected {count} floats at byte {self._offset}, "
                              f"only {self.remaining} bytes left")
        values = np.frombuffer(self._data, dtype=_F64, count=count, offset=self._offset)
        self._offset += num_bytes
        return values

def encode(network: NeuralNetwork) -> bytes:
    """
    Encode the full weight state of a network.

    Parameters:
        network: The network to encode

    Returns:
        The encoded bytes
    """
    hidden  = network.hidden_layers
    outputs = network.output_weights
    num_layers, width = hidden.shape

    pairs  = np.zeros((width, 2), dtype=_F64)
    chunks = [_U64.pack(num_layers)]
    for layer_weights in hidden:
        pairs[:, 1] = layer_weights
        chunks.append(_U64.pack(width))
        chunks.append(pairs.tobytes())

    chunks.append(_U64.pack(len(outputs)))
    chunks.append(outputs.astype(_F64).tobytes())
    return b"".join(chunks)

def decode(data: bytes) -> NeuralNetwork:
    """
    Decode a network produced by encode().

    Parameters:
        data: The encoded bytes

    Returns:
        A network whose weights are bit-for-bit those that were encoded

    Raises:
        DecodeError:       If the data is truncated or has trailing bytes
        DimensionMismatch: If the encoded hidden layers have unequal widths
    """
    reader = _Reader(bytes(data))

    layers = []
    for _ in range(reader.read_length()):
        width = reader.read_length()
        pairs = reader.read_floats(2 * width).reshape(width, 2)
        layers.append(pairs[:, 1])

    outputs = reader.read_floats(reader.read_length())

    if reader.remaining:
        raise DecodeError(f"{reader.remaining} trailing bytes after the network encoding")

    return NeuralNetwork.new_from(layers, outputs)

def save(network: NeuralNetwork, path: str | Path) -> None:
    """Write the encoding of 'network' to 'path', replacing any existing file."""
    Path(path).write_bytes(encode(network))

def load(path: str | Path) -> NeuralNetwork:
    """Read a network previously written by save()."""
    return decode(Path(path).read_bytes())
