#!/usr/bin/env python3
"""
Utility script to visualize a saved network.

Usage:
    python scripts/visualize_network.py --network example.brain
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from smarty_pants import DecodeError, load


def main():
    parser = argparse.ArgumentParser(description='Visualize a saved network')
    parser.add_argument('--network', type=str, required=True,
                        help='Path to a file written by smarty_pants.save()')
    parser.add_argument('--output', type=str, default='network',
                        help='Output filename (without extension)')
    parser.add_argument('--format', type=str, default='png',
                        choices=['png', 'pdf', 'svg'],
                        help='Output format')
    parser.add_argument('--no-view', action='store_true',
                        help='Do not automatically open the generated file')

    args = parser.parse_args()

    try:
        network = load(args.network)
    except DecodeError as e:
        print(f"Error: '{args.network}' does not hold a network ({e})")
        sys.exit(1)

    dot = network.visualize(view=False)
    dot.format = args.format
    dot.render(args.output, view=not args.no_view)
    print(f"Network visualization saved to {args.output}.{args.format}")


if __name__ == '__main__':
    main()
