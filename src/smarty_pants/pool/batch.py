"""
Batch Module

This module implements the population-level helpers which compose the network
core into a generation-based search: creating a population of identical
networks, running one input through a whole population, and expanding a
selected parent into a population of mutated children.

Every helper works on each network independently, so all of them accept a
'num_jobs' argument and can spread the work over processes with joblib:
    num_jobs=1:  Serial execution (no parallelization)
    num_jobs>1:  Use specified number of parallel processes
    num_jobs=-1: Use all available CPU cores

Functions:
    batch_new:    Create a population of identically-initialized networks
    batch_run:    Evaluate the same input against every network of a population
    batch_mutate: Clone a network into a population of mutated children
"""

import numpy as np
from joblib import Parallel, delayed
from typing import Sequence

from smarty_pants.network import NeuralNetwork

def batch_new(count            : int,
              default_weight   : float,
              num_hidden_layers: int,
              neurons_per_layer: int,
              num_outputs      : int) -> list[NeuralNetwork]:
    """
    Create 'count' independent networks, all initialized to 'default_weight'.
    The networks share no weight storage.

    Returns:
        List of 'count' networks
    """
    if count < 0:
        raise ValueError(f"'count' cannot be negative, got {count}")

    return [NeuralNetwork.new(default_weight, num_hidden_layers, neurons_per_layer, num_outputs)
            for _ in range(count)]

def batch_run(networks: Sequence[NeuralNetwork],
              inputs  : Sequence[float] | np.ndarray,
              num_jobs: int = 1) -> list[np.ndarray]:
    """
    Run the same inputs through each network.

    Parameters:
        networks: The networks to evaluate
        inputs:   Inputs passed unchanged to every network's run()
        num_jobs: Number of parallel processes

    Returns:
        One output array per network, in the order of 'networks'
    """
    serialize = num_jobs == 1

    if serialize:
        return [network.run(inputs) for network in networks]
    return Parallel(num_jobs)(delayed(network.run)(inputs) for network in networks)

def _mutated_clone(network        : NeuralNetwork,
                   mutation_rate  : float,
                   include_outputs: bool,
                   rng            : np.random.Generator) -> NeuralNetwork:
    child = network.clone()
    child.mutate(mutation_rate, include_outputs, rng)
    return child

def batch_mutate(count          : int,
                 mutation_rate  : float,
                 source_network : NeuralNetwork,
                 include_outputs: bool,
                 rng            : np.random.Generator | None = None,
                 num_jobs       : int = 1) -> list[NeuralNetwork]:
    """
    Turn one network into 'count' mutated copies of it.

    Each child is a deep clone of 'source_network' which is then mutated with
    its own generator, spawned from 'rng'. Because the child generators do not
    depend on execution order, serial and parallel execution produce the same
    children for the same seed. 'source_network' is never modified.

    Parameters:
        count:           Number of children to produce
        mutation_rate:   Largest absolute change applied to a weight
        source_network:  The parent network
        include_outputs: Whether the output weights are mutated as well
        rng:             Source of randomness; a fresh unseeded generator is
                         used if None
        num_jobs:        Number of parallel processes

    Returns:
        List of 'count' mutated networks
    """
    if count < 0:
        raise ValueError(f"'count' cannot be negative, got {count}")

    if rng is None:
        rng = np.random.default_rng()
    child_rngs = rng.spawn(count)
    serialize  = num_jobs == 1

    if serialize:
        return [_mutated_clone(source_network, mutation_rate, include_outputs, child_rng)
                for child_rng in child_rngs]
    return Parallel(num_jobs)(delayed(_mutated_clone)(source_network, mutation_rate, include_outputs, child_rng)
                              for child_rng in child_rngs)
