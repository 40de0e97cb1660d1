"""
Trial Module

This module defines the abstract base class for a mutation-based search with
built-in support for CPU-based parallelization using joblib.

A trial represents one independent run of the search: a population of
networks is evaluated, the fittest network becomes the parent of the next
generation, and the process repeats until a solution is found or the maximum
number of generations is reached.
"""

import numpy as np
from abc    import ABC, abstractmethod
from typing import Sequence

from smarty_pants.network import NeuralNetwork
from smarty_pants.pool    import batch_mutate, batch_run
from smarty_pants.run.config import Config

class Trial(ABC):
    """
    Abstract base class for implementing a search trial.

    Every generation, all networks of the population are run on the same
    inputs (see _get_inputs()) and each output is scored by
    _evaluate_fitness(). The fittest network is then cloned and mutated into
    the next population; it does not survive itself. The best network seen
    over the whole trial is kept as the champion.

    Subclasses must implement:
    - _reset(): Reset trial-specific state and call super()._reset()
    - _get_inputs(): The inputs given to every network
    - _evaluate_fitness(outputs): Score the outputs of a single network
    - _report_progress(): Display progress after each generation
    - _final_report(): Display final results

    Subclasses can override:
    - _terminate(): Custom termination logic (default: max generations + fitness threshold)

    Public Attributes:
        failed: False once the fitness threshold has been reached

    Public Properties:
        generation:       Number of the current generation (0 for the initial population)
        population:       The networks of the current generation
        fitness:          Fitness of each network of the current generation
        champion:         Copy of the fittest network seen so far
        champion_fitness: Fitness of the champion

    Public Methods:
        run(): Execute a complete trial
        get_fittest_network(): The fittest network of the current generation

    Parallelization of batch operations:
        num_jobs=1:  Serial evaluation (no parallelization)
        num_jobs>1:  Use specified number of parallel processes
        num_jobs=-1: Use all available CPU cores
    """

    def __init__(self, config: Config, suppress_output: bool = False):
        """
        Initialize the trial.

        Parameters:
            config:          Configuration parameters
            suppress_output: If True, suppress progress and final reports
        """
        self._config            : Config                     = config
        self._generation_counter: int                        = 0
        self._population        : list[NeuralNetwork]        = []
        self._fitness           : list[float]                = []
        self._champion          : NeuralNetwork | None       = None
        self._champion_fitness  : float | None               = None
        self._rng               : np.random.Generator | None = None
        self._suppress_output   : bool                       = suppress_output
        self.failed             : bool                       = True

    @property
    def generation(self) -> int:
        return self._generation_counter

    @property
    def population(self) -> list[NeuralNetwork]:
        return list(self._population)

    @property
    def fitness(self) -> list[float]:
        return list(self._fitness)

    @property
    def champion(self) -> NeuralNetwork | None:
        return self._champion

    @property
    def champion_fitness(self) -> float | None:
        return self._champion_fitness

    def run(self, num_jobs: int = 1):
        """
        Run the trial.

        Resets the trial state and runs the search until
        the terminate condition is met.

        Parameters:
            num_jobs: Number of parallel processes for the batch operations
                      1 = serial (no parallelization)
                     -1 = use all available CPU cores
                     >1 = use specified number of processes
        """
        # Reset the trial state before starting a new run
        self._reset()

        # The initial population is made of mutated copies of a uniform network
        parent = NeuralNetwork.new(self._config.default_weight,
                                   self._config.num_hidden_layers,
                                   self._config.neurons_per_layer,
                                   self._config.num_outputs)
        self._population = self._mutate_into_population(parent, num_jobs)

        # Evaluate the fitness of the initial population
        self._evaluate_fitness_all(num_jobs)

        if not self._suppress_output:
            self._report_progress()

        # Evolution loop
        while not self._terminate():
            self._generation_counter += 1

            # The fittest network becomes the parent of the whole next generation
            parent = self.get_fittest_network()
            self._population = self._mutate_into_population(parent, num_jobs)

            self._evaluate_fitness_all(num_jobs)

            if not self._suppress_output:
                self._report_progress()

        if not self._suppress_output:
            self._final_report()

    def _mutate_into_population(self, parent: NeuralNetwork, num_jobs: int) -> list[NeuralNetwork]:
        return batch_mutate(self._config.population_size,
                            self._config.mutation_rate,
                            parent,
                            self._config.mutate_outputs,
                            rng=self._rng,
                            num_jobs=num_jobs)

    @abstractmethod
    def _reset(self):
        """
        Reset the trial state before starting a new run.

        Subclasses should call super()._reset() and then
        initialize their problem-specific data.
        """
        self._rng                = np.random.default_rng(self._config.seed)
        self._generation_counter = 0
        self._population         = []
        self._fitness            = []
        self._champion           = None
        self._champion_fitness   = None
        self.failed              = True

    @abstractmethod
    def _get_inputs(self) -> Sequence[float] | np.ndarray:
        """
        Return the inputs which every network of the population is run on.
        A 2D array runs each network on a whole batch of samples at once.
        """
        pass

    @abstractmethod
    def _evaluate_fitness(self, outputs: np.ndarray) -> float:
        """
        Evaluate and return the fitness of a network, given its outputs.

        Higher fitness values are better; the fittest network of
        each generation is the parent of the next one.

        Parameters:
            outputs: What the network returned for _get_inputs()

        Returns:
            float: Fitness score for the network
        """
        pass

    def _evaluate_fitness_all(self, num_jobs: int):
        """
        Run every network on the trial inputs, score the outputs,
        and update the champion.
        """
        outputs_all   = batch_run(self._population, self._get_inputs(), num_jobs)
        self._fitness = [float(self._evaluate_fitness(outputs)) for outputs in outputs_all]

        fittest_idx = self._get_fittest_index()
        if fittest_idx is None:
            return

        fittest_fitness = self._fitness[fittest_idx]
        if self._champion_fitness is None or fittest_fitness > self._champion_fitness:
            self._champion         = self._population[fittest_idx].clone()
            self._champion_fitness = fittest_fitness

    def _get_fittest_index(self) -> int | None:
        if not self._fitness:
            return None
        return max(range(len(self._fitness)), key=self._fitness.__getitem__)

    def get_fittest_network(self) -> NeuralNetwork | None:
        """
        Find and return the network with the highest fitness in the current
        generation. Assumes the population has already been evaluated.

        Returns:
            The fittest network, or None if the population is empty or
            has not been evaluated yet
        """
        fittest_idx = self._get_fittest_index()
        return None if fittest_idx is None else self._population[fittest_idx]

    @abstractmethod
    def _report_progress(self):
        """
        Report trial progress after each generation.

        This method is suppressed by setting 'self._suppress_output' to 'True'.
        """
        pass

    @abstractmethod
    def _final_report(self):
        """
        Produce final report at the end of the trial.

        This method is suppressed by setting 'self._suppress_output' to 'True'.
        """
        pass

    def _terminate(self) -> bool:
        """
        Determine whether the trial should terminate.

        This default implementation stops the trial after a maximum number
        of generations and (optionally) also stops it if the best fitness
        of the current generation has reached a given threshold.

        Subclasses can override this method for custom termination logic.

        Returns:
            bool: True if the trial should stop, False otherwise
        """
        # Has this trial run for too long?
        terminate = self._generation_counter >= self._config.max_number_generations

        # Check whether the fitness has reached a target threshold
        if self._config.fitness_termination_check:
            if self._config.fitness_threshold is None:
                raise RuntimeError("'fitness_threshold' is required when 'fitness_termination_check' is True")

            success   = bool(self._fitness) and max(self._fitness) >= self._config.fitness_threshold
            terminate = terminate or success

            if terminate:
                self.failed = not success

        return terminate
