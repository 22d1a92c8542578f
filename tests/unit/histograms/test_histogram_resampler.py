import os
import sys

sys.path.insert(1, os.path.join(sys.path[0], "../../.."))

import random

import numpy
import pytest

from rangesel.exceptions import InvalidInternalStateError
from rangesel.histograms import build_histogram
from rangesel.histograms import resample
from rangesel.histograms import target_grid


def test_target_grid_edges():
    edges = target_grid(0, 20, 4)
    assert edges.tolist() == [0.0, 5.0, 10.0, 15.0, 20.0]


def test_target_grid_last_edge_is_exact():
    # 0.1 can't be represented exactly, the accumulated edge would drift
    edges = target_grid(0.1, 0.7, 3)
    assert len(edges) == 4
    assert edges[0] == 0.1
    assert edges[-1] == 0.7


def test_target_grid_single_bin():
    assert target_grid(-1, 1, 1).tolist() == [-1.0, 1.0]


@pytest.mark.parametrize("bins", [0, -1])
def test_target_grid_needs_bins(bins):
    with pytest.raises(InvalidInternalStateError):
        target_grid(0, 10, bins)


def test_target_grid_inverted():
    with pytest.raises(InvalidInternalStateError):
        target_grid(10, 0, 2)


def test_resample_onto_same_grid_is_unchanged():
    hist = build_histogram([0, 10, 20], [5, 5])
    resampled = resample(hist, 0, 20, 2)

    assert resampled.bins == hist.bins
    assert resampled.total_mass == hist.total_mass


def test_resample_returns_new_histogram():
    hist = build_histogram([0, 10, 20], [5, 5])
    resampled = resample(hist, 0, 20, 4)

    assert resampled is not hist
    assert hist.bin_count == 2
    assert resampled.bin_count == 4


def test_resample_splits_mass_by_span():
    hist = build_histogram([0, 4, 6], [6, 2])
    resampled = resample(hist, 0, 6, 3)

    assert resampled.masses().tolist() == pytest.approx([3, 3, 2])
    assert resampled.domain_min == 0
    assert resampled.domain_max == 6


def test_resample_merges_bins():
    hist = build_histogram([0, 1, 2, 3, 4], [1, 2, 3, 4])
    resampled = resample(hist, 0, 4, 2)

    assert resampled.masses().tolist() == pytest.approx([3, 7])


def test_resample_drops_mass_outside_grid():
    hist = build_histogram([0, 10, 20], [5, 5])
    resampled = resample(hist, 5, 15, 2)

    assert resampled.masses().tolist() == pytest.approx([2.5, 2.5])
    assert resampled.total_mass == pytest.approx(5)


def test_resample_grid_wider_than_histogram():
    hist = build_histogram([10, 20], [8])
    resampled = resample(hist, 0, 40, 4)

    assert resampled.masses().tolist() == pytest.approx([0, 8, 0, 0])


def test_resample_scans_every_source_bin():
    # more source bins than target bins, the last source bins must still be read
    hist = build_histogram(list(range(11)), [1] * 9 + [100])
    resampled = resample(hist, 0, 10, 2)

    assert resampled.masses().tolist() == pytest.approx([5, 104])
    assert resampled.total_mass == pytest.approx(hist.total_mass)


def test_resample_fewer_source_bins_than_target():
    hist = build_histogram([0, 100], [10])
    resampled = resample(hist, 0, 100, 50)

    assert resampled.bin_count == 50
    assert resampled.masses() == pytest.approx(numpy.full(50, 0.2))


def test_resample_zero_width_source_bin_moves_no_mass():
    hist = build_histogram([0, 5, 5, 10], [1, 7, 1])
    resampled = resample(hist, 0, 10, 2)

    assert resampled.total_mass == pytest.approx(2)


def test_mass_conservation_under_full_coverage():
    random.seed(7)
    for _ in range(50):
        bin_count = random.randint(1, 30)
        boundaries = sorted(random.uniform(-1000, 1000) for _ in range(bin_count + 1))
        # avoid zero-length bins, these carry no mass into any grid
        boundaries = [b + i * 1e-3 for i, b in enumerate(boundaries)]
        masses = [random.uniform(0, 50) for _ in range(bin_count)]
        hist = build_histogram(boundaries, masses)

        for grid_bins in (1, 2, 7, 100):
            resampled = resample(hist, hist.domain_min, hist.domain_max, grid_bins)
            assert resampled.total_mass == pytest.approx(hist.total_mass, rel=1e-9)


def test_target_grid_very_wide_domain():
    edges = target_grid(-1e308, 1e308, 4)
    assert numpy.isfinite(edges).all()
    assert edges.tolist() == pytest.approx([-1e308, -5e307, 0.0, 5e307, 1e308])
    assert (numpy.diff(edges) > 0).all()


def test_resample_very_wide_histogram():
    hist = build_histogram([-1e308, 1e308], [10])
    resampled = resample(hist, -1e308, 1e308, 2)

    assert resampled.masses().tolist() == pytest.approx([5, 5])


if __name__ == "__main__":  # pragma: no cover
    from tests.tools import run_tests

    run_tests()
