# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Error types for the selectivity estimators, structured in the manner of PEP-0249.

Exception Hierarchy:

Exception
 └── Error [PEP-0249]
     └── DatabaseError [PEP-0249]
         ├── InvalidConfigurationError
         ├── InvalidInternalStateError
         │   └── MalformedStatisticsError
         └── ProgrammingError [PEP-0249]
             ├── DataError
             │   ├── EmptyOverlapDomainError
             │   └── StatisticsUnavailableError
             ├── EstimatorNotFoundError
             ├── ParameterError
             └── SecurityError
                 └── PermissionsError

StatisticsUnavailableError, PermissionsError and EmptyOverlapDomainError are
expected during planning and are recovered by the estimators, they never reach
the optimizer. MalformedStatisticsError indicates corrupted catalog state.
"""

from typing import Any
from typing import Optional


# ======================== Begin PEP-0249 Exceptions ========================
# These should not be thrown directly unless explicitly required for standards compliance
class Error(Exception):
    """
    https://www.python.org/dev/peps/pep-0249/
    Exception that is the base class of all other error exceptions. You can use this to
    catch all errors with one single except statement.
    """


class DatabaseError(Error):
    """
    https://www.python.org/dev/peps/pep-0249/
    Exception raised for errors that are related to the database.
    """


class ProgrammingError(DatabaseError):
    """
    https://www.python.org/dev/peps/pep-0249/
    Exception raised for programming errors, e.g. table not found, wrong number of
    parameters specified, etc.
    """


# ======================== End PEP-0249 Exceptions ==========================


# ======================== Begin Superclasses ========================
# These should not be thrown directly
class DataError(ProgrammingError):
    """Superclass for data-related errors."""


class SecurityError(ProgrammingError):
    """Superclass for security-related errors."""


# ======================== End Superclasses ==========================


# ======================== Begin Statistics Errors ========================
class StatisticsUnavailableError(DataError):
    """Raised when no histogram statistics have been recorded for an attribute."""

    def __init__(self, attribute: Any = None, message: Optional[str] = None):
        self.attribute = attribute
        if message is None:
            message = f"No histogram statistics are available for '{attribute}'."
        super().__init__(message)


class EmptyOverlapDomainError(DataError):
    """Raised when the domains of two histograms do not intersect."""

    def __init__(self, lower: float, upper: float):
        self.lower = lower
        self.upper = upper
        message = f"Histogram domains do not overlap, common domain would be [{lower}, {upper}]."
        super().__init__(message)


class PermissionsError(SecurityError):
    """Raised when an operator's support function may not read the statistics."""

    def __init__(self, attribute: Any = None, operator: Optional[str] = None):
        self.attribute = attribute
        self.operator = operator
        message = f"Statistics for '{attribute}' cannot be used by operator '{operator}'."
        super().__init__(message)


class EstimatorNotFoundError(ProgrammingError):
    """Raised when a selectivity estimator is requested by a name that isn't registered."""

    def __init__(self, name: str, suggestion: Optional[str] = None):
        self.name = name
        self.suggestion = suggestion
        message = f"Selectivity estimator '{name}' does not exist."
        if suggestion is not None:
            message += f" Did you mean '{suggestion}'?"
        super().__init__(message)


# ======================== End Statistics Errors ==========================


# ======================== Begin Configuration & Internal Errors ========================
class InvalidConfigurationError(DatabaseError):
    """Exception raised for invalid configuration."""

    def __init__(
        self, *, config_item: str, provided_value: Any, valid_value_description: str = None
    ):
        DISPLAY_LIMIT: int = 32

        self.config_item = config_item
        self.provided_value = provided_value
        self.valid_value_description = valid_value_description

        provided = str(provided_value)
        message = f"Value of '{provided[:DISPLAY_LIMIT]}{'...' if len(provided) > DISPLAY_LIMIT else ''}' for '{config_item}' is not valid."
        if valid_value_description:
            message += f" Value should be {valid_value_description}"
        super().__init__(message)


class InvalidInternalStateError(DatabaseError):
    """Exception raised for invalid internal states."""


class ParameterError(ProgrammingError):
    """Exception raised for parameter errors."""


class MalformedStatisticsError(InvalidInternalStateError):
    """The statistics store returned arrays that can't describe a histogram."""


# ======================== End Configuration & Internal Errors ==========================
