"""
Unit tests for the network error hierarchy.
"""

import pytest

from smarty_pants.network.errors import (Axis,
                                         ColumnOutOfBounds,
                                         DecodeError,
                                         DimensionMismatch,
                                         InvalidMutationRate,
                                         NetworkError,
                                         OutOfBoundsError,
                                         RowOutOfBounds)


class TestHierarchy:
    """Test that every error can be caught through its bases."""

    @pytest.mark.parametrize("error_class", [RowOutOfBounds, ColumnOutOfBounds])
    def test_out_of_bounds_bases(self, error_class):
        assert issubclass(error_class, OutOfBoundsError)
        assert issubclass(error_class, NetworkError)
        assert issubclass(error_class, IndexError)

    @pytest.mark.parametrize("error_class", [DimensionMismatch, InvalidMutationRate, DecodeError])
    def test_value_error_bases(self, error_class):
        assert issubclass(error_class, NetworkError)
        assert issubclass(error_class, ValueError)


class TestOutOfBoundsError:
    """Test the attributes and messages of the out-of-bounds errors."""

    def test_row_attributes(self):
        error = RowOutOfBounds(12, 10)
        assert error.axis  == Axis.LAYER
        assert error.index == 12
        assert error.bound == 10

    def test_column_attributes(self):
        error = ColumnOutOfBounds(4, 3)
        assert error.axis  == Axis.NEURON
        assert error.index == 4
        assert error.bound == 3

    def test_message_names_axis_and_range(self):
        assert str(RowOutOfBounds(12, 10))   == "layer index 12 is out of bounds (valid range is 0..9)"
        assert str(ColumnOutOfBounds(-1, 3)) == "neuron index -1 is out of bounds (valid range is 0..2)"

    def test_message_for_empty_axis(self):
        assert str(RowOutOfBounds(0, 0)) == "layer index 0 is out of bounds (axis is empty)"

    def test_axis_values(self):
        assert Axis.LAYER.value  == "layer"
        assert Axis.NEURON.value == "neuron"

    def test_pickle_round_trip(self):
        """Test that errors raised in worker processes keep their attributes."""
        import pickle
        error = pickle.loads(pickle.dumps(ColumnOutOfBounds(5, 3)))
        assert isinstance(error, ColumnOutOfBounds)
        assert error.index == 5
        assert error.bound == 3
        assert str(error) == "neuron index 5 is out of bounds (valid range is 0..2)"
