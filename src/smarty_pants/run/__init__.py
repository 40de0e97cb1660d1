"""
Run Package

This package implements trial execution for the mutation-based search.

A trial represents a complete search run, managing the population through
generations until a solution is found or maximum generations are reached.

Modules:
    config: Configuration management for search parameters
    trial:  Abstract base class for search trials

Exported Classes:
    Config: Configuration parameters for a search
    Trial:  Abstract base class for search trials with joblib parallelization
"""

from smarty_pants.run.config import Config
from smarty_pants.run.trial  import Trial

__all__ = ['Config','Trial']
