#!/usr/bin/env python3
"""
Utility script to run the examples easily.

Usage:
    python scripts/run_example.py target
    python scripts/run_example.py target --target 25 --num-jobs 4
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from smarty_pants import Config
from examples.trial_target_value import Trial_TargetValue


EXAMPLES = {
    'target': {
        'trial': Trial_TargetValue,
        'config': 'examples/configs/config_target_value.ini',
        'description': 'Reach a target output value'
    }
}


def main():
    parser = argparse.ArgumentParser(description='Run examples')
    parser.add_argument('example', choices=EXAMPLES.keys(),
                        help='Example to run')
    parser.add_argument('--target', type=float, default=10.0,
                        help='Output value the networks should reach')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random generator (overrides the config file)')
    parser.add_argument('--num-jobs', type=int, default=1,
                        help='Number of parallel jobs')

    args = parser.parse_args()

    example = EXAMPLES[args.example]
    print(f"Running {example['description']}...")

    config = Config(example['config'])
    if args.seed is not None:
        config.seed = args.seed

    trial = example['trial'](config, target=args.target)
    trial.run(num_jobs=args.num_jobs)
    print(f"\nBest fitness: {trial.champion_fitness:.4f}")


if __name__ == '__main__':
    main()
