"""Domain-specific exceptions for POS Insights.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from PosInsightsError for easy catching.
"""


class PosInsightsError(Exception):
    """Base exception for all POS Insights errors.

    Users can catch this exception to handle any error raised by the
    analytics engine or its record repositories.
    """

    pass


class ConfigError(PosInsightsError):
    """Raised when there is a configuration error.

    This exception is raised when:
    - Required configuration (such as the data root) is missing
    - Configuration values cannot be interpreted
    """

    pass


class DataQualityError(PosInsightsError):
    """Raised when stored records violate their invariants.

    This exception is raised when:
    - Required columns are missing from a record file
    - Dates cannot be parsed
    - Sales amounts are negative
    - More than one register close exists for a store and date
    """

    pass


class InvalidRequestError(PosInsightsError, ValueError):
    """Raised when analytics request parameters are invalid.

    This exception is raised before any record is fetched when:
    - The period kind is unknown
    - The store id is not an integer
    - Only one side of an explicit date range is given
    - The explicit date range is reversed
    """

    pass


class MalformedDateError(InvalidRequestError):
    """Raised when an anchor, start or end date string does not parse."""

    pass


class FetchError(PosInsightsError):
    """Raised when the record repository fails to return records.

    The underlying exception is always attached as ``__cause__``. The engine
    never computes a partial report after a fetch failure.
    """

    pass
