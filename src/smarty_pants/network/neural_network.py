"""
Neural Network Module

This module implements the NeuralNetwork class, a minimal scalar feed-forward
network meant to be improved by random mutation and selection rather than by
backpropagation.

The network has no activation functions and no biases. Every hidden neuron
owns a single weight which scales the *sum* of everything the previous layer
produced, and every output channel owns a single weight which scales the sum
of the last hidden layer. A layer therefore has as many parameters as it has
neurons, which makes the network cheap to evaluate and cheap to perturb.

Classes:
    NeuralNetwork: Weight storage, forward pass and mutation operator
"""

import copy
import math
import numpy as np
from typing import Sequence
import graphviz  # type: ignore

from smarty_pants.network.errors import (ColumnOutOfBounds,
                                         DimensionMismatch,
                                         InvalidMutationRate,
                                         RowOutOfBounds)

class NeuralNetwork:
    """
    A feed-forward network with one scalar weight per neuron.

    Hidden weights are kept in a 2D array of shape (num_hidden_layers,
    neurons_per_layer), so all hidden layers always share the same width.
    Output weights are kept in a 1D array of length num_outputs, which never
    changes after construction.

    Networks are built with one of the two constructors:
        NeuralNetwork.new(...):      every weight set to the same value
        NeuralNetwork.new_from(...): weights given explicitly, layer by layer

    A network with zero hidden layers, or with zero neurons per layer, can be
    constructed but cannot be run: the failure is deferred to run().

    Public Properties:
        num_hidden_layers: Number of hidden layers
        neurons_per_layer: Width shared by all hidden layers
        num_outputs:       Number of output channels
        hidden_layers:     Copy of the hidden weights as a 2D array
        output_weights:    Copy of the output weights as a 1D array

    Public Methods:
        get_weight(layer, neuron):         Read a single hidden weight
        set_weight(weight, layer, neuron): Overwrite a single hidden weight
        get_weights():                     All hidden weights as nested lists
        get_output_weights():              All output weights as a list
        run(inputs):                       Forward pass
        mutate(rate, include_outputs):     Random in-place perturbation
        clone():                           Deep copy
        to_dict() / from_dict():           Plain-dictionary representation
        visualize():                       Graphviz rendering of the network
    """

    def __init__(self, hidden_layers: np.ndarray, output_weights: np.ndarray):
        """
        Wrap weight arrays that already have the right shape.
        Prefer the 'new' and 'new_from' constructors, which validate their input.

        Parameters:
            hidden_layers:  2D float64 array, one row per hidden layer
            output_weights: 1D float64 array, one entry per output channel
        """
        self._hidden_layers : np.ndarray = hidden_layers
        self._output_weights: np.ndarray = output_weights

    @classmethod
    def new(cls,
            default_weight   : float,
            num_hidden_layers: int,
            neurons_per_layer: int,
            num_outputs      : int) -> 'NeuralNetwork':
        """
        Create a network in which every hidden and output weight is 'default_weight'.

        Zero layers or zero neurons per layer are accepted here, but the
        resulting network raises when run() is called.

        Parameters:
            default_weight:    Value given to every weight
            num_hidden_layers: Number of hidden layers
            neurons_per_layer: Number of neurons in each hidden layer
            num_outputs:       Number of output channels

        Returns:
            The new network
        """
        for name, value in (("num_hidden_layers", num_hidden_layers),
                            ("neurons_per_layer", neurons_per_layer),
                            ("num_outputs",       num_outputs)):
            if value < 0:
                raise ValueError(f"'{name}' cannot be negative, got {value}")

        hidden_layers  = np.full((num_hidden_layers, neurons_per_layer), default_weight, dtype=np.float64)
        output_weights = np.full(num_outputs, default_weight, dtype=np.float64)
        return cls(hidden_layers, output_weights)

    @classmethod
    def new_from(cls,
                 hidden_layer_weights: Sequence[Sequence[float]],
                 output_weights      : Sequence[float]) -> 'NeuralNetwork':
        """
        Create a network from explicit weights. The input is copied.

        Parameters:
            hidden_layer_weights: One sequence of weights per hidden layer
            output_weights:       One weight per output channel

        Returns:
            The new network

        Raises:
            DimensionMismatch: If the hidden layers do not all have the same
                               width, or a layer is not a flat sequence
        """
        layers = [np.asarray(layer, dtype=np.float64) for layer in hidden_layer_weights]
        if any(layer.ndim != 1 for layer in layers):
            raise DimensionMismatch("each hidden layer must be a flat sequence of weights")

        widths = [len(layer) for layer in layers]
        if len(set(widths)) > 1:
            raise DimensionMismatch(f"hidden layers must share the same width, got widths {widths}")
        width = widths[0] if widths else 0

        hidden = np.empty((len(layers), width), dtype=np.float64)
        for idx, layer in enumerate(layers):
            hidden[idx] = layer

        outputs = np.array(output_weights, dtype=np.float64)
        if outputs.ndim != 1:
            raise DimensionMismatch("output weights must be a flat sequence of weights")

        return cls(hidden, outputs)

    @property
    def num_hidden_layers(self) -> int:
        """Number of hidden layers."""
        return self._hidden_layers.shape[0]

    @property
    def neurons_per_layer(self) -> int:
        """Number of neurons in every hidden layer."""
        return self._hidden_layers.shape[1]

    @property
    def num_outputs(self) -> int:
        """Number of output channels."""
        return self._output_weights.shape[0]

    @property
    def hidden_layers(self) -> np.ndarray:
        """Copy of the hidden weights, shape (num_hidden_layers, neurons_per_layer)."""
        return self._hidden_layers.copy()

    @property
    def output_weights(self) -> np.ndarray:
        """Copy of the output weights, shape (num_outputs,)."""
        return self._output_weights.copy()

    def _check_index(self, layer_index: int, neuron_index: int) -> None:
        num_layers, width = self._hidden_layers.shape
        if not 0 <= layer_index < num_layers:
            raise RowOutOfBounds(layer_index, num_layers)
        if not 0 <= neuron_index < width:
            raise ColumnOutOfBounds(neuron_index, width)

    def get_weight(self, layer_index: int, neuron_index: int) -> float:
        """
        Get the weight of a single hidden neuron.

        Parameters:
            layer_index:  Index of the hidden layer
            neuron_index: Index of the neuron within that layer

        Returns:
            The weight of the neuron

        Raises:
            RowOutOfBounds:    If 'layer_index' does not address a hidden layer
            ColumnOutOfBounds: If 'neuron_index' is outside the addressed layer
        """
        self._check_index(layer_index, neuron_index)
        return float(self._hidden_layers[layer_index, neuron_index])

    def set_weight(self, weight: float, layer_index: int, neuron_index: int) -> None:
        """
        Set the weight of a single hidden neuron.

        The neuron index is checked against the width of the addressed layer.
        Nothing is modified when either index is out of bounds.

        Parameters:
            weight:       The new weight
            layer_index:  Index of the hidden layer
            neuron_index: Index of the neuron within that layer

        Raises:
            RowOutOfBounds:    If 'layer_index' does not address a hidden layer
            ColumnOutOfBounds: If 'neuron_index' is outside the addressed layer
        """
        self._check_index(layer_index, neuron_index)
        self._hidden_layers[layer_index, neuron_index] = weight

    def get_weights(self) -> list[list[float]]:
        """Return a copy of all hidden weights, one list per layer."""
        return self._hidden_layers.tolist()

    def get_output_weights(self) -> list[float]:
        """Return a copy of the output weights."""
        return self._output_weights.tolist()

    def run(self, inputs: Sequence[float] | np.ndarray) -> np.ndarray:
        """
        Perform a forward pass through the network.

        Each neuron of the first hidden layer outputs its weight times the sum
        of the inputs. Each neuron of a following layer outputs its weight times
        the sum of the previous layer's outputs. Each output channel returns
        its weight times the sum of the last hidden layer's outputs. No
        activation function is applied, so values may grow or shrink
        geometrically with depth.

        The network is not modified.

        Parameters:
            inputs: Input values as a list or numpy array
                    Shape: (num_inputs,) or (batch_size, num_inputs)
                    The number of inputs is free, only their sum matters

        Returns:
            Output values as a numpy array
            Shape: (num_outputs,) or (batch_size, num_outputs)

        Raises:
            RowOutOfBounds:    If the network has no hidden layer
            ColumnOutOfBounds: If the hidden layers have no neurons
            DimensionMismatch: If the hidden weights are not a 2D array
            ValueError:        If the inputs are not 1D or 2D
        """
        self._check_runnable()

        inputs = np.asarray(inputs, dtype=np.float64)
        if inputs.ndim not in (1, 2):
            raise ValueError(f"Input must be 1D or 2D array, got {inputs.ndim}D")

        # Every neuron in a layer receives the same incoming sum, so a single
        # column per sample carries the signal from one layer to the next
        incoming = inputs.sum(axis=-1, keepdims=True)
        for layer_weights in self._hidden_layers:
            activations = layer_weights * incoming
            incoming    = activations.sum(axis=-1, keepdims=True)

        return self._output_weights * incoming

    def _check_runnable(self) -> None:
        if self._hidden_layers.ndim != 2:
            raise DimensionMismatch(f"hidden weights must be a 2D array, got {self._hidden_layers.ndim}D")
        num_layers, width = self._hidden_layers.shape
        if num_layers == 0:
            raise RowOutOfBounds(0, num_layers)
        if width == 0:
            raise ColumnOutOfBounds(0, width)

    def mutate(self,
               mutation_rate  : float,
               include_outputs: bool,
               rng            : np.random.Generator | None = None) -> None:
        """
        Perturb every hidden weight by a value drawn uniformly from
        [-mutation_rate, +mutation_rate], independently for each weight.
        If 'include_outputs' is True, the output weights are perturbed too.

        Hidden weights are drawn first, layer by layer, then output weights,
        so a seeded generator gives reproducible results.

        Parameters:
            mutation_rate:   Largest absolute change applied to a weight
            include_outputs: Whether the output weights are mutated as well
            rng:             Source of randomness; a fresh unseeded generator
                             is used if None

        Raises:
            InvalidMutationRate: If 'mutation_rate' is negative, NaN or infinite
        """
        if not math.isfinite(mutation_rate) or mutation_rate < 0:
            raise InvalidMutationRate(f"mutation rate must be a finite non-negative number, got {mutation_rate}")

        if rng is None:
            rng = np.random.default_rng()

        self._hidden_layers += rng.uniform(-mutation_rate, mutation_rate, size=self._hidden_layers.shape)
        if include_outputs:
            self._output_weights += rng.uniform(-mutation_rate, mutation_rate, size=self._output_weights.shape)

    def clone(self) -> 'NeuralNetwork':
        """
        Create a deep copy of this network; no weight storage is shared.
        """
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        """
        Convert the network to a dictionary of plain Python values.

        This is the inverse operation of from_dict().

        Returns:
            Dictionary with the following structure:
            {
                "hidden_layers":  [[1.0, 1.0, 1.0], [0.5, 2.0, 1.0]],
                "output_weights": [1.0, -1.0]
            }
        """
        return {
            "hidden_layers" : self.get_weights(),
            "output_weights": self.get_output_weights()
        }

    @classmethod
    def from_dict(cls, network_dict: dict) -> 'NeuralNetwork':
        """
        Create a network from the dictionary produced by to_dict().

        Raises:
            KeyError:          If a required field is missing
            DimensionMismatch: If the hidden layers have unequal widths
        """
        return cls.new_from(network_dict["hidden_layers"], network_dict["output_weights"])

    def visualize(self, view: bool = True) -> graphviz.Digraph:
        """
        Visualize the network using Graphviz.

        The summed input is drawn as a single node, since the network only
        ever sees the sum of its inputs. Each hidden neuron and each output
        channel is labelled with its weight.

        Parameters:
            view: If True, automatically open the visualization after rendering

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')
        dot.attr('graph', labelloc='t')

        node_attrs = {'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5',
                      'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}
        edge_attrs = {'penwidth': '0.5', 'arrowsize': '0.5'}

        with dot.subgraph(name='cluster_input') as input_cluster:
            input_cluster.attr(rank='source', label='Inputs', style='invisible')
            input_cluster.node('in', label='sum(inputs)', fillcolor='lightgrey', **node_attrs)

        previous = ['in']
        for layer_idx, layer_weights in enumerate(self._hidden_layers):
            names = [f"h{layer_idx}_{neuron_idx}" for neuron_idx in range(len(layer_weights))]
            with dot.subgraph(name=f'cluster_hidden_{layer_idx}') as hidden_cluster:
                hidden_cluster.attr(rank='same', label=f'Layer {layer_idx}', style='invisible')
                for name, weight in zip(names, layer_weights):
                    hidden_cluster.node(name, label=f"{name}\\nw={weight:.2f}", fillcolor='lightblue', **node_attrs)
            for src in previous:
                for dst in names:
                    dot.edge(src, dst, **edge_attrs)
            previous = names

        with dot.subgraph(name='cluster_output') as output_cluster:
            output_cluster.attr(rank='sink', label='Outputs', style='invisible')
            for output_idx, weight in enumerate(self._output_weights):
                output_cluster.node(f"out{output_idx}", label=f"out{output_idx}\\nw={weight:.2f}",
                                    fillcolor='white', **node_attrs)

        for src in previous:
            for output_idx in range(self.num_outputs):
                dot.edge(src, f"out{output_idx}", **edge_attrs)

        if view:
            dot.view(cleanup=True)

        return dot

    def __eq__(self, other):
        if not isinstance(other, NeuralNetwork):
            return NotImplemented
        # Without hidden layers there is no width to compare
        same_hidden = (self.num_hidden_layers == other.num_hidden_layers == 0 or
                       np.array_equal(self._hidden_layers, other._hidden_layers))
        return same_hidden and np.array_equal(self._output_weights, other._output_weights)

    __hash__ = None

    def __str__(self):
        layer_info = [f"  Layer {idx}: " + ", ".join(f"{w:+.2f}" for w in layer)
                      for idx, layer in enumerate(self._hidden_layers)]
        output_info = "  Outputs: " + ", ".join(f"{w:+.2f}" for w in self._output_weights)
        return "\n".join(layer_info + [output_info])

    def __repr__(self):
        return (f"NeuralNetwork(layers={self.num_hidden_layers}, "
                f"neurons_per_layer={self.neurons_per_layer}, "
                f"outputs={self.num_outputs})")
