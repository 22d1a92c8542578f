# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Configuration for the selectivity estimators.

Values are read, in order of precedence, from environment variables, from a
`rangesel.yaml` file in the current working directory, and finally from the
defaults below. The values are read once, at import, so the bin granularity
used by the estimators is fixed for the life of the process.
"""

import datetime
import typing
from os import environ
from pathlib import Path

from rangesel.exceptions import InvalidConfigurationError

_config_values: dict = {}

# we need a preliminary version of this variable
_RANGESEL_DEBUG = environ.get("RANGESEL_DEBUG") is not None


def parse_yaml(yaml_str: str) -> dict:
    """
    Parse the small subset of YAML used by the configuration file.

    Supports `key: value` pairs, inline lists (`key: [a, b]`), dashed lists
    under a bare `key:` and `#` comments. Scalars are coerced to int, float,
    bool or None where they look like one.
    """

    def line_value(value):
        value = value.strip()
        if value.isdigit():
            return int(value)
        if value.replace(".", "", 1).replace("e-", "", 1).isdigit():
            return float(value)
        if value.lower() == "true":
            return True
        if value.lower() == "false":
            return False
        if value.lower() == "none":
            return None
        if value.startswith("["):
            return [val.strip() for val in value[1:-1].split(",")]
        return value

    result: dict = {}
    list_key: typing.Optional[str] = None
    for line in yaml_str.strip().split("\n"):
        ## remove comments
        line = line.split("#")[0].strip()
        if not line:
            continue
        if list_key is not None and line.startswith("- "):
            result[list_key].append(line_value(line[2:]))
            continue
        list_key = None
        key, value = line.split(":", 1)
        if not value.strip():
            list_key = key.strip()
            result[list_key] = []
        else:
            result[key.strip()] = line_value(value)
    return result


try:  # pragma: no cover
    _config_path = Path(".") / "rangesel.yaml"
    if _config_path.exists():
        with open(_config_path, "r", encoding="UTF8") as _config_file:
            _config_values = parse_yaml(_config_file.read())
        if _RANGESEL_DEBUG:
            print(f"{datetime.datetime.now()} [LOADER] Loading config from {_config_path}")
except Exception as exception:  # pragma: no cover # it doesn't matter why - just use the defaults
    if _RANGESEL_DEBUG:
        print(
            f"{datetime.datetime.now()} [LOADER] Config file {_config_path} not used - {exception}"
        )


def get(key, default=None):
    value = environ.get(key)
    if value is None:
        value = _config_values.get(key, default)
    return value


def as_bool(value) -> bool:
    """environment variables are strings, 'false' should be False"""
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false", "no", "off", "none")
    return bool(value)


# fmt:off

# Number of equal-width bins both sides of a join are resampled onto before comparison
HISTOGRAM_RESAMPLE_BINS: int = int(get("HISTOGRAM_RESAMPLE_BINS", 100))
# Selectivity returned for range overlap joins when the histograms can't be used
DEFAULT_OVERLAP_SELECTIVITY: float = float(get("DEFAULT_OVERLAP_SELECTIVITY", 0.005))
# Smallest selectivity we will ever report, the planner treats zero as 'no rows'
MIN_SELECTIVITY: float = float(get("MIN_SELECTIVITY", 1.0e-10))
# debug mode
RANGESEL_DEBUG: bool = as_bool(get("RANGESEL_DEBUG", False))

# fmt:on

if HISTOGRAM_RESAMPLE_BINS < 1:
    raise InvalidConfigurationError(
        config_item="HISTOGRAM_RESAMPLE_BINS",
        provided_value=HISTOGRAM_RESAMPLE_BINS,
        valid_value_description="a positive integer",
    )
if not 0.0 <= MIN_SELECTIVITY <= DEFAULT_OVERLAP_SELECTIVITY <= 1.0:
    raise InvalidConfigurationError(
        config_item="DEFAULT_OVERLAP_SELECTIVITY",
        provided_value=DEFAULT_OVERLAP_SELECTIVITY,
        valid_value_description=f"a probability no smaller than MIN_SELECTIVITY ({MIN_SELECTIVITY})",
    )
