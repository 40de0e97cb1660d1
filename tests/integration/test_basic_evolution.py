"""
Integration tests for the complete search loop.

These tests run real trials end-to-end on the target value problem and
check the properties a user relies on: the search reaches its goal, it is
reproducible for a fixed seed, and the result survives a save/load cycle.

NOTE: These tests use a fixed random seed (42) for reproducibility.
"""

import pytest
import numpy as np

from smarty_pants import NeuralNetwork, batch_mutate, batch_new, batch_run, load, save
from smarty_pants.run.config import Config
from examples.trial_target_value import Trial_TargetValue
from examples.load_save import main as load_save_main


# ============================================================================
# Test Basic Evolution - Problem Solving
# ============================================================================

class TestTargetValue:
    """Test that the search reaches a target output."""

    def test_reaches_target(self, target_config):
        trial = Trial_TargetValue(target_config, target=10.0, suppress_output=True)
        trial.run(num_jobs=1)

        assert trial.failed is False
        assert trial.generation < target_config.max_number_generations
        output = trial.champion.run([1.0])[0]
        assert abs(output - 10.0) <= 0.5

    def test_reaches_negative_target(self, target_config):
        trial = Trial_TargetValue(target_config, target=-4.0, suppress_output=True)
        trial.run(num_jobs=1)

        assert trial.failed is False
        assert abs(trial.champion.run([1.0])[0] + 4.0) <= 0.5

    def test_already_at_target(self, target_config):
        """Test that a network starting on the target stops at generation 0."""
        target_config.mutation_rate = 0.0
        trial = Trial_TargetValue(target_config, target=3.0, suppress_output=True)
        trial.run()

        assert trial.generation == 0
        assert trial.failed is False
        assert trial.champion == NeuralNetwork.new(1.0, 1, 3, 1)

    def test_gives_up_after_max_generations(self, target_config):
        target_config.mutation_rate          = 0.0
        target_config.max_number_generations = 10
        trial = Trial_TargetValue(target_config, target=10.0, suppress_output=True)
        trial.run()

        assert trial.generation == 10
        assert trial.failed is True
        assert trial.champion_fitness == pytest.approx(-7.0)

    def test_reproducible(self, target_config):
        target_config.max_number_generations = 50
        target_config.fitness_termination_check = False

        first = Trial_TargetValue(target_config, suppress_output=True)
        first.run()
        second = Trial_TargetValue(target_config, suppress_output=True)
        second.run()

        assert first.champion == second.champion
        assert first.champion_fitness == second.champion_fitness

    def test_parallel_reproduces_serial(self, target_config):
        target_config.max_number_generations = 20
        target_config.fitness_termination_check = False

        serial = Trial_TargetValue(target_config, suppress_output=True)
        serial.run(num_jobs=1)
        parallel = Trial_TargetValue(target_config, suppress_output=True)
        parallel.run(num_jobs=2)

        assert parallel.champion == serial.champion
        assert parallel.population == serial.population

    def test_reports_printed(self, target_config, capsys):
        target_config.max_number_generations = 3
        target_config.fitness_termination_check = False
        trial = Trial_TargetValue(target_config, report_every=1)
        trial.run()

        out = capsys.readouterr().out
        assert "GENERATION 00000" in out
        assert "GENERATION 00003" in out
        assert "FAILED" in out
        assert "Layer 0:" in out

    def test_reports_suppressed(self, target_config, capsys):
        target_config.max_number_generations = 3
        trial = Trial_TargetValue(target_config, report_every=1, suppress_output=True)
        trial.run()
        assert capsys.readouterr().out == ""


# ============================================================================
# Test Batch Operations End-to-End
# ============================================================================

class TestManualGenerations:
    """Drive a search by hand with the batch operations."""

    def test_hand_written_loop(self):
        rng    = np.random.default_rng(3)
        parent = batch_new(1, 1.0, 2, 4, 2)[0]
        inputs = np.array([[1.0, 0.5], [-1.0, 2.0]])

        for _ in range(25):
            children = batch_mutate(8, 0.2, parent, True, rng)
            outputs  = batch_run(children, inputs)
            # push the first output of every sample towards zero
            scores   = [-np.abs(out[:, 0]).sum() for out in outputs]
            parent   = children[int(np.argmax(scores))]

        assert np.abs(parent.run(inputs)[:, 0]).sum() < np.abs(
            NeuralNetwork.new(1.0, 2, 4, 2).run(inputs)[:, 0]).sum()

    def test_deep_network_scenario(self):
        network = batch_new(1, 1.0, 10, 10, 3)[0]
        np.testing.assert_array_equal(network.run([1.0, 1.0, 1.0]), [3e10, 3e10, 3e10])


# ============================================================================
# Test Persistence End-to-End
# ============================================================================

class TestPersistence:
    """Test that the result of a search can be stored and reloaded."""

    def test_save_champion(self, target_config, tmp_path):
        target_config.max_number_generations = 30
        target_config.fitness_termination_check = False
        trial = Trial_TargetValue(target_config, suppress_output=True)
        trial.run()

        path = tmp_path / "champion.brain"
        save(trial.champion, path)
        restored = load(path)

        assert restored == trial.champion
        assert restored.run([1.0])[0] == trial.champion.run([1.0])[0]

    def test_load_save_example(self, tmp_path, capsys):
        path = tmp_path / "example.brain"
        load_save_main(str(path))

        assert path.exists()
        assert "Saved and reloaded" in capsys.readouterr().out


# ============================================================================
# Test Config Integration
# ============================================================================

class TestConfigIntegration:
    """Test that the shipped configuration file drives a trial."""

    def test_load_real_config(self, target_config_path):
        config = Config(str(target_config_path))

        assert config.num_hidden_layers == 1
        assert config.neurons_per_layer == 3
        assert config.num_outputs == 1
        assert config.population_size == 5
        assert config.fitness_termination_check is True
        assert config.fitness_threshold == -0.1
        assert config.seed is None

    def test_population_follows_config(self, target_config):
        target_config.population_size        = 7
        target_config.num_hidden_layers      = 2
        target_config.max_number_generations = 2
        target_config.fitness_termination_check = False

        trial = Trial_TargetValue(target_config, suppress_output=True)
        trial.run()

        assert len(trial.population) == 7
        assert all(network.num_hidden_layers == 2 for network in trial.population)
