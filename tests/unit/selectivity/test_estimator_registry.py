import os
import sys

sys.path.insert(1, os.path.join(sys.path[0], "../../.."))

import pytest

from rangesel.exceptions import EstimatorNotFoundError
from rangesel.exceptions import ParameterError
from rangesel.models import EstimationStatistics
from rangesel.selectivity import AreaSelectivityEstimator
from rangesel.selectivity import ContainmentSelectivityEstimator
from rangesel.selectivity import PositionSelectivityEstimator
from rangesel.selectivity import RangeOverlapsJoinEstimator
from rangesel.selectivity import SelectivityEstimator
from rangesel.selectivity import get_estimator
from tests.tools import attribute
from tests.tools import make_store

LEFT = attribute("boxes.shape")
RIGHT = attribute("regions.shape")

# fmt:off
CONSTANTS = [
    ("areasel",         0.005),
    ("areajoinsel",     0.005),
    ("positionsel",     0.1),
    ("positionjoinsel", 0.1),
    ("contsel",         0.001),
    ("contjoinsel",     0.001),
]
# fmt:on


@pytest.mark.parametrize("name, expected", CONSTANTS)
def test_constant_estimators(name, expected):
    estimator = get_estimator(name)

    assert isinstance(estimator, SelectivityEstimator)
    assert estimator.restriction_selectivity(LEFT, (0, 1)) == expected
    assert estimator.join_selectivity(LEFT, RIGHT) == expected


def test_containment_is_tighter_than_area():
    assert ContainmentSelectivityEstimator.selectivity < AreaSelectivityEstimator.selectivity
    assert AreaSelectivityEstimator.selectivity < PositionSelectivityEstimator.selectivity


def test_constant_estimators_count_calls():
    statistics = EstimationStatistics()
    estimator = get_estimator("areasel", statistics=statistics)
    estimator.join_selectivity(LEFT, RIGHT)
    estimator.restriction_selectivity(LEFT, 3)

    assert statistics.estimates_constant == 2


def test_range_overlaps_estimator_from_registry():
    store = make_store(boxes__shape=([0, 10, 20], [5, 5]), regions__shape=([0, 10, 20], [5, 5]))
    estimator = get_estimator("rangeoverlapsjoinsel", store=store)

    assert isinstance(estimator, RangeOverlapsJoinEstimator)
    assert estimator.store is store
    assert 0.0 < estimator.join_selectivity(LEFT, RIGHT) <= 1.0


def test_range_overlaps_estimator_needs_a_store():
    with pytest.raises(ParameterError):
        get_estimator("rangeoverlapsjoinsel")


def test_names_are_case_insensitive():
    assert isinstance(get_estimator("AreaSel"), AreaSelectivityEstimator)


def test_unknown_estimator_with_suggestion():
    with pytest.raises(EstimatorNotFoundError) as err:
        get_estimator("areasell")
    assert err.value.suggestion == "areasel"
    assert "Did you mean 'areasel'?" in str(err.value)


def test_unknown_estimator_without_suggestion():
    with pytest.raises(EstimatorNotFoundError) as err:
        get_estimator("eqjoinsel_semi")
    assert err.value.suggestion is None


if __name__ == "__main__":  # pragma: no cover
    from tests.tools import run_tests

    run_tests()
