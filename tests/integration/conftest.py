"""
Shared fixtures for integration tests.
"""

import pytest
from pathlib import Path

from smarty_pants.run.config import Config


@pytest.fixture
def target_config_path():
    """Path of the configuration file shipped with the target value example."""
    return Path(__file__).parent.parent.parent / "examples" / "configs" / "config_target_value.ini"


@pytest.fixture
def target_config(target_config_path):
    """Target value configuration with a fixed seed and a looser margin."""
    config = Config(str(target_config_path))
    config.seed                   = 42
    config.max_number_generations = 5000
    config.fitness_threshold      = -0.5
    return config
