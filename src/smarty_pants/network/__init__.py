"""
Network Package

This package implements the network core: a scalar feed-forward network with
one weight per neuron, its forward pass, its mutation operator, and the
errors raised when it is addressed or evaluated incorrectly.

Modules:
    neural_network: NeuralNetwork class
    errors:         Exception hierarchy rooted at NetworkError

Exported Classes:
    NeuralNetwork:       Weight storage, forward pass and mutation operator
    Axis:                Axis of an out-of-bounds index (LAYER or NEURON)
    NetworkError:        Base class for all network errors
    OutOfBoundsError:    Base class for the two out-of-bounds errors
    RowOutOfBounds:      Invalid layer index
    ColumnOutOfBounds:   Invalid neuron index
    DimensionMismatch:   Hidden layers of unequal width
    InvalidMutationRate: Negative or non-finite mutation rate
    DecodeError:         Malformed byte encoding
"""

from smarty_pants.network.errors         import (Axis,
                                                 ColumnOutOfBounds,
                                                 DecodeError,
                                                 DimensionMismatch,
                                                 InvalidMutationRate,
                                                 NetworkError,
                                                 OutOfBoundsError,
                                                 RowOutOfBounds)
from smarty_pants.network.neural_network import NeuralNetwork

__all__ = ['Axis',
           'ColumnOutOfBounds',
           'DecodeError',
           'DimensionMismatch',
           'InvalidMutationRate',
           'NetworkError',
           'NeuralNetwork',
           'OutOfBoundsError',
           'RowOutOfBounds']
