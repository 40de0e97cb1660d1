"""
Network Errors Module

This module defines the exceptions raised by the network core. All of them
derive from NetworkError, so callers can catch everything the package raises
deliberately with a single except clause, while the secondary bases
(IndexError, ValueError) keep them compatible with ordinary Python handling.

Classes:
    Axis:                Enumeration naming the axis of an out-of-bounds index
    NetworkError:        Base class for all network errors
    OutOfBoundsError:    An index fell outside the weight storage
    RowOutOfBounds:      The layer index is invalid
    ColumnOutOfBounds:   The neuron index is invalid for the addressed layer
    DimensionMismatch:   Hidden layers do not share the same width
    InvalidMutationRate: The mutation rate is negative or not finite
    DecodeError:         A byte encoding of a network is malformed
"""

from enum import Enum

class Axis(Enum):
    """
    The two axes of the hidden weight storage.
    """
    LAYER  = "layer"
    NEURON = "neuron"

class NetworkError(Exception):
    """Base class for every error raised by the network core."""

class OutOfBoundsError(NetworkError, IndexError):
    """
    An index addressed a weight that does not exist.

    Public Attributes:
        axis:  The axis on which the index was invalid
        index: The offending index
        bound: The exclusive upper bound the index was checked against
    """

    axis: Axis = None

    def __init__(self, index: int, bound: int):
        self.index: int = index
        self.bound: int = bound
        super().__init__(f"{self.axis.value} index {index} is out of bounds "
                         f"(valid range is 0..{bound - 1})" if bound > 0 else
                         f"{self.axis.value} index {index} is out of bounds (axis is empty)")

    def __reduce__(self):
        # Rebuild from (index, bound) when sent back from a joblib worker
        return type(self), (self.index, self.bound)

class RowOutOfBounds(OutOfBoundsError):
    """The layer index is outside the hidden layers."""
    axis = Axis.LAYER

class ColumnOutOfBounds(OutOfBoundsError):
    """The neuron index is outside the addressed layer."""
    axis = Axis.NEURON

class DimensionMismatch(NetworkError, ValueError):
    """Hidden layers of unequal width, or weight storage of the wrong shape."""

class InvalidMutationRate(NetworkError, ValueError):
    """The mutation rate is negative, NaN or infinite."""

class DecodeError(NetworkError, ValueError):
    """A byte string does not hold a complete network encoding."""
