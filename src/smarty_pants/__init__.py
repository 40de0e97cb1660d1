"""
smarty_pants - minimal scalar neural networks for mutation-based search.

This package provides a feed-forward network with a single weight per neuron,
no activation function and no biases, designed to be improved by random
mutation and selection instead of gradient descent.

Main components:
- network:     The NeuralNetwork type, its forward pass and mutation operator
- pool:        Population helpers (batch_new, batch_run, batch_mutate)
- persistence: Byte encoding of networks, and file save/load
- run:         Search configuration and the abstract generation loop

Example:
    >>> from smarty_pants import NeuralNetwork, batch_mutate, batch_run
    >>> parent   = NeuralNetwork.new(1.0, 1, 3, 1)
    >>> children = batch_mutate(5, 0.25, parent, True)
    >>> outputs  = batch_run(children, [1.0])
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from smarty_pants.network     import (NeuralNetwork,
                                      NetworkError,
                                      RowOutOfBounds,
                                      ColumnOutOfBounds,
                                      DimensionMismatch,
                                      InvalidMutationRate,
                                      DecodeError)
from smarty_pants.pool        import batch_new, batch_run, batch_mutate
from smarty_pants.persistence import encode, decode, save, load
from smarty_pants.run         import Config, Trial

__all__ = [
    "NeuralNetwork",
    "NetworkError",
    "RowOutOfBounds",
    "ColumnOutOfBounds",
    "DimensionMismatch",
    "InvalidMutationRate",
    "DecodeError",
    "batch_new",
    "batch_run",
    "batch_mutate",
    "encode",
    "decode",
    "save",
    "load",
    "Config",
    "Trial",
]
