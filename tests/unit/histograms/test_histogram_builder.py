import os
import sys

sys.path.insert(1, os.path.join(sys.path[0], "../../.."))

import numpy
import pytest

from rangesel.exceptions import InvalidInternalStateError
from rangesel.exceptions import MalformedStatisticsError
from rangesel.histograms import build_histogram
from rangesel.models import Bin


def test_build_simple_histogram():
    hist = build_histogram([0, 10, 20], [5, 5])

    assert hist.bin_count == 2
    assert hist.bins == (Bin(0.0, 10.0, 5.0), Bin(10.0, 20.0, 5.0))
    assert hist.total_mass == 10
    assert hist.domain_min == 0
    assert hist.domain_max == 20


def test_build_single_bin():
    hist = build_histogram([2.5, 7.5], [3])

    assert len(hist) == 1
    assert hist.domain_min == 2.5
    assert hist.domain_max == 7.5
    assert hist.total_mass == 3


def test_domain_keeps_fractional_bounds():
    hist = build_histogram([0.25, 1.5, 2.75], [1, 1])

    assert hist.domain_min == 0.25
    assert hist.domain_max == 2.75


def test_domain_from_unsorted_bins():
    # bins 0 and 2 are out of order, the extent covers all of them
    hist = build_histogram([10, 20, 5, 8], [1, 0, 1])

    assert hist.domain_min == 5
    assert hist.domain_max == 20


def test_domain_of_negative_values():
    # the extent must come from the bins, not from a zero initial value
    hist = build_histogram([-30, -20, -10], [1, 2])

    assert hist.domain_min == -30
    assert hist.domain_max == -10


def test_bins_are_zero_mass():
    hist = build_histogram([0, 1, 2], [0, 0])

    assert hist.total_mass == 0
    assert hist.domain_min == 0
    assert hist.domain_max == 2


def test_numpy_views():
    hist = build_histogram(numpy.array([0, 1, 3]), numpy.array([2, 4]))

    assert hist.lowers().tolist() == [0.0, 1.0]
    assert hist.uppers().tolist() == [1.0, 3.0]
    assert hist.masses().tolist() == [2.0, 4.0]
    assert hist.masses().dtype == numpy.float64


def test_histogram_is_immutable():
    hist = build_histogram([0, 1], [1])

    with pytest.raises(AttributeError):
        hist.total_mass = 10
    with pytest.raises(AttributeError):
        hist.bins[0].mass = 10


def test_temporal_boundaries():
    boundaries = numpy.array(["2024-01-01", "2024-01-02", "2024-01-04"], dtype="datetime64[D]")
    hist = build_histogram(boundaries, [1, 2])

    one_day = 24 * 60 * 60 * 1_000_000
    epoch_days = (numpy.datetime64("2024-01-01") - numpy.datetime64("1970-01-01")).astype(int)
    assert hist.domain_min == epoch_days * one_day
    assert hist.domain_max - hist.domain_min == 3 * one_day
    assert hist.bins[0].span == one_day


@pytest.mark.parametrize(
    "boundaries, masses",
    [
        ([0, 10, 20], [5]),  # too many boundaries
        ([0, 10], [5, 5]),  # too few boundaries
        ([0], []),  # no bins
        ([], []),  # nothing at all
        ([0, 10, 5], [1, 1]),  # second bin is inverted
        ([0, 10], [-1]),  # negative mass
        ([0, float("inf")], [1]),  # unbounded
        ([0, 10], [float("nan")]),  # nan mass
        (["a", "b"], [1]),  # not numbers
    ],
)
def test_malformed_statistics(boundaries, masses):
    with pytest.raises(MalformedStatisticsError):
        build_histogram(boundaries, masses)


def test_malformed_statistics_is_internal_error():
    with pytest.raises(InvalidInternalStateError):
        build_histogram([0, 1, 2], [1])


if __name__ == "__main__":  # pragma: no cover
    from tests.tools import run_tests

    run_tests()
