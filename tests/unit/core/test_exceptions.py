import os
import sys

sys.path.insert(1, os.path.join(sys.path[0], "../../.."))

import pytest

from rangesel import exceptions


@pytest.mark.parametrize(
    "error, parent",
    [
        (exceptions.StatisticsUnavailableError, exceptions.DataError),
        (exceptions.EmptyOverlapDomainError, exceptions.DataError),
        (exceptions.PermissionsError, exceptions.SecurityError),
        (exceptions.MalformedStatisticsError, exceptions.InvalidInternalStateError),
        (exceptions.InvalidInternalStateError, exceptions.DatabaseError),
        (exceptions.ProgrammingError, exceptions.DatabaseError),
        (exceptions.DatabaseError, exceptions.Error),
    ],
)
def test_hierarchy(error, parent):
    assert issubclass(error, parent)


def test_empty_overlap_domain_message():
    err = exceptions.EmptyOverlapDomainError(20.0, 10.0)
    assert err.lower == 20.0
    assert err.upper == 10.0
    assert "[20.0, 10.0]" in str(err)


def test_statistics_unavailable_message():
    err = exceptions.StatisticsUnavailableError("bookings.stay")
    assert "bookings.stay" in str(err)
    assert str(exceptions.StatisticsUnavailableError(message="custom")) == "custom"


def test_invalid_configuration_truncates_long_values():
    err = exceptions.InvalidConfigurationError(
        config_item="HISTOGRAM_RESAMPLE_BINS", provided_value="x" * 100, valid_value_description="a number"
    )
    assert "x" * 32 + "..." in str(err)
    assert "a number" in str(err)


def test_invalid_configuration_accepts_numbers():
    err = exceptions.InvalidConfigurationError(config_item="bin_count", provided_value=0)
    assert "'0'" in str(err)


if __name__ == "__main__":  # pragma: no cover
    from tests.tools import run_tests

    run_tests()
