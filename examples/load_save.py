"""
Save and Load

Shows that a network written to disk and read back behaves exactly like the
original: same weights, same outputs.

Usage:
    python examples/load_save.py [path]
"""

import sys

from smarty_pants import NeuralNetwork, load, save

def main(path: str = "example.brain"):
    network = NeuralNetwork.new(1.0, 1, 3, 1)
    network.mutate(0.5, True)
    output = network.run([1.0])[0]

    save(network, path)
    loaded_network = load(path)
    output_loaded  = loaded_network.run([1.0])[0]

    assert loaded_network == network
    assert output == output_loaded
    print(f"Saved and reloaded '{path}': output {output_loaded:.6f} in both cases")

if __name__ == '__main__':
    main(*sys.argv[1:2])
