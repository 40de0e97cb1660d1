"""Pytest configuration and shared fixtures."""

import pytest
import sys
import numpy as np
from pathlib import Path

# Add the project root (for examples/) and the source directory to the Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))
sys.path.insert(0, str(root_dir / "src"))


@pytest.fixture
def rng():
    """Provide a seeded random generator for reproducible mutations."""
    return np.random.default_rng(42)


@pytest.fixture
def deep_network():
    """Create the 10-layer, 10-neuron, 3-output network with every weight at 1.0."""
    from smarty_pants.network import NeuralNetwork
    return NeuralNetwork.new(1.0, 10, 10, 3)


@pytest.fixture
def small_network():
    """Create a 1-layer, 3-neuron, 1-output network with every weight at 1.0."""
    from smarty_pants.network import NeuralNetwork
    return NeuralNetwork.new(1.0, 1, 3, 1)
