import configparser
import os

class Config:

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config with default values
                         which can then be modified attribute by attribute.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.default_weight    = 1.0
            self.num_hidden_layers = 1
            self.neurons_per_layer = 3
            self.num_outputs       = 1

            self.population_size = 5

            self.mutation_rate  = 0.25
            self.mutate_outputs = True

            self.max_number_generations    = 100
            self.fitness_termination_check = False
            self.fitness_threshold         = None

            self.seed = None

            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [NETWORK]

        # The value given to every hidden and output weight of the initial network.
        self.default_weight = get_value('NETWORK', 'default_weight', float)

        # The number of hidden layers of each network.
        self.num_hidden_layers = get_value('NETWORK', 'num_hidden_layers', int)

        # The number of neurons in each hidden layer (all layers share the same width).
        self.neurons_per_layer = get_value('NETWORK', 'neurons_per_layer', int)

        # The number of output channels of each network.
        self.num_outputs = get_value('NETWORK', 'num_outputs', int)

        # [POPULATION]

        # The number of networks in each generation.
        self.population_size = get_value('POPULATION', 'population_size', int)

        # [MUTATION]

        # The largest absolute change mutation applies to a weight.
        # Each weight moves by a value drawn uniformly from [-mutation_rate, +mutation_rate].
        self.mutation_rate = get_value('MUTATION', 'mutation_rate', float)

        # Whether mutation also changes the output weights,
        # or only the weights of the hidden neurons.
        self.mutate_outputs = get_value('MUTATION', 'mutate_outputs', bool, default=True)

        # [TERMINATION]

        # The number of generations after which to stop the run.
        # If 'fitness_termination_check' is 'True', the run may stop sooner.
        self.max_number_generations = get_value('TERMINATION', 'max_number_generations', int)

        # Whether to use the best fitness of the most recent
        # generation as a criterion for stopping the run.
        self.fitness_termination_check = get_value('TERMINATION', 'fitness_termination_check', bool, default=False)

        # The fitness value which when met or exceeded causes the run to end.
        # Only applicable if 'fitness_termination_check' is 'True'.
        self.fitness_threshold = get_value('TERMINATION', 'fitness_threshold', float, default=None)

        # [RANDOM] (optional section)

        # Seed for the random generator driving mutation. Use "None" for an
        # unpredictable run. The seed is never stored inside a network.
        self.seed = get_value('RANDOM', 'seed', int, default=None)

        self._validate()

    def _validate(self):
        """
        Reject values which would make a run meaningless.
        """
        for name in ('num_hidden_layers', 'neurons_per_layer', 'num_outputs', 'max_number_generations'):
            if getattr(self, name) < 0:
                raise ValueError(f"'{name}' cannot be negative in configuration file")

        if self.population_size < 1:
            raise ValueError("'population_size' must be at least 1 in configuration file")

        if self.mutation_rate < 0:
            raise ValueError("'mutation_rate' cannot be negative in configuration file")

        if self.fitness_termination_check and self.fitness_threshold is None:
            raise ValueError("'fitness_threshold' is required when 'fitness_termination_check' is True")
