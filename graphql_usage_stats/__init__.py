# Copyright 2021-present Kensho Technologies, LLC.
"""Commonly-used functions and data types from this package."""
from .exceptions import (  # noqa
    GraphQLParsingError,
    GraphQLUsageStatsError,
    InvalidOperationSelectionError,
    RequestStatsError,
)
from .request_stats import add_request_stats, compute_request_stats  # noqa
from .typedefs import (  # noqa
    EnumTypeStat,
    EnumValueStat,
    InputFieldStat,
    InputTypeStat,
    RequestSummary,
)


__package_name__ = "graphql-usage-stats"
__version__ = "1.0.0"
