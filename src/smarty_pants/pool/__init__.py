"""
Pool Package

This package implements the population-level operations: creating, running and
mutating whole generations of networks.

Modules:
    batch: batch_new, batch_run and batch_mutate

Exported Functions:
    batch_new:    Create a population of identically-initialized networks
    batch_run:    Evaluate the same input against every network of a population
    batch_mutate: Clone a network into a population of mutated children
"""

from smarty_pants.pool.batch import batch_mutate, batch_new, batch_run

__all__ = ['batch_mutate',
           'batch_new',
           'batch_run']
