"""
Target Value Problem

This module implements the simplest possible search problem: find a network
which, given a fixed input, outputs a value close to a fixed target.

The Problem:
    Input:  the single value 1.0
    Output: a single value within 'margin' of 10.0

    The initial network (one layer of three neurons, every weight 1.0)
    outputs 3.0, so the search has to grow its weights until their product
    of sums reaches the target.

Fitness Function:
    Fitness = -|output - target|

    The maximum fitness of 0.0 is reached when the output equals the target.
    The trial succeeds when the fitness reaches -margin, which is set as the
    'fitness_threshold' in the configuration file.

There are no checks for dead ends or regressions: the fittest network of a
generation always becomes the only parent of the next one, even when it is
worse than its own parent.

Classes:
    Trial_TargetValue: Search trial for reaching a target value

Usage:
    config = Config("examples/configs/config_target_value.ini")
    trial  = Trial_TargetValue(config, target=10.0)
    trial.run(num_jobs=1)
"""

import numpy as np
import time
from pathlib import Path

from smarty_pants.run import Config, Trial

class Trial_TargetValue(Trial):
    """
    Search trial for reaching a target output from a fixed input.

    Implemented Methods:
        _get_inputs():               The single fixed input
        _evaluate_fitness(outputs):  Minus the distance between output and target
        _report_progress():          Print the best output every 'report_every' generations
        _final_report():             Print the champion network
    """

    def __init__(self,
                 config         : Config,
                 target         : float = 10.0,
                 input_value    : float = 1.0,
                 report_every   : int   = 100,
                 suppress_output: bool  = False):
        """
        Initialize the trial.

        Parameters:
            config:          Configuration parameters
            target:          The output value to reach
            input_value:     The value fed to every network
            report_every:    Print a progress report every this many generations
            suppress_output: If True, suppress progress and final reports
        """
        super().__init__(config, suppress_output)
        self.target       = target
        self.input_value  = input_value
        self.report_every = report_every
        self._start_time  = None

    def _reset(self):
        """Reset trial state."""
        super()._reset()
        self._start_time = time.perf_counter()

    def _get_inputs(self) -> np.ndarray:
        return np.array([self.input_value])

    def _evaluate_fitness(self, outputs: np.ndarray) -> float:
        return -abs(float(outputs[0]) - self.target)

    def _report_progress(self):
        """
        Print the best output of the current generation.
        """
        if self._generation_counter % self.report_every != 0:
            return

        fittest = self.get_fittest_network()
        output  = fittest.run(self._get_inputs())[0]

        s  = f"GENERATION {self._generation_counter:05d}: "
        s += f"best output = {output:.4f}, "
        s += f"distance to target = {-max(self._fitness):.4f}"
        print(s)

    def _final_report(self):
        """
        Print the champion network and how long the search took.
        """
        elapsed = time.perf_counter() - self._start_time
        output  = self.champion.run(self._get_inputs())[0]

        s  = "===============\n"
        s += "FINISHED\n" if not self.failed else "FAILED to get within the margin\n"
        s += f"generations = {self._generation_counter}\n"
        s += f"elapsed     = {elapsed:.3f}s\n"
        s += f"value       = {output:.4f}\n"
        s += f"network:\n{self.champion}"
        print(s)

if __name__ == '__main__':
    config = Config(str(Path(__file__).parent / "configs" / "config_target_value.ini"))
    trial  = Trial_TargetValue(config)
    trial.run(num_jobs=1)
