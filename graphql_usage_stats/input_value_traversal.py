# Copyright 2021-present Kensho Technologies, LLC.
"""Collect usage statistics from a variable value, validating it against its GraphQL type.

The validation mirrors the rules graphql-core applies when coercing variable values, since
variable values have not been validated yet at the point where statistics are collected.
"""
from typing import Any, Iterable, Mapping

from graphql import (
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLInputType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLScalarType,
)
from graphql.pyutils import Undefined

from .exceptions import (
    InvalidEnumValueError,
    MissingRequiredInputFieldError,
    NonObjectValueError,
    NullValueForNonNullTypeError,
    ScalarParseError,
    ScalarParseUndefinedError,
    UnexpectedInputTypeError,
    UnknownInputFieldError,
)
from .stats_aggregation import record_enum_value_usage, record_input_field_usage
from .typedefs import RequestSummary


def _is_collection(value: Any) -> bool:
    """Return True if the value is a list-like collection of values."""
    # Strings and mappings are iterable, but are never treated as lists of values.
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping))


def _add_input_object_value_stats(
    summary: RequestSummary, input_value: Any, input_type: GraphQLInputObjectType
) -> None:
    """Record and check every field of an input object value, then check for unknown fields."""
    if not isinstance(input_value, Mapping):
        raise NonObjectValueError(
            f"Expected a mapping value for input object type {input_type.name}, but got "
            f"{input_value} of type {type(input_value).__name__} instead."
        )

    input_fields = input_type.fields
    for field_name, input_field in input_fields.items():
        if field_name not in input_value:
            if input_field.default_value is Undefined and isinstance(
                input_field.type, GraphQLNonNull
            ):
                raise MissingRequiredInputFieldError(
                    f"Field {field_name} of type {input_field.type} is required by input object "
                    f"type {input_type.name}, but was not provided."
                )
            continue

        field_value = input_value[field_name]
        record_input_field_usage(
            summary, input_type.name, field_name, str(input_field.type), field_value is None
        )
        add_input_value_stats(summary, field_value, input_field.type)

    unknown_field_names = set(input_value.keys()) - set(input_fields.keys())
    if unknown_field_names:
        raise UnknownInputFieldError(
            f"Input object type {input_type.name} does not have the provided field(s) "
            f"{sorted(unknown_field_names)}."
        )


def _add_scalar_value_stats(input_value: Any, input_type: GraphQLScalarType) -> None:
    """Check that the scalar type accepts the value. Scalars are not recorded in statistics."""
    # Scalars signal invalid values by raising from parse_value(), with any exception type.
    try:
        parse_result = input_type.parse_value(input_value)
    except Exception as e:
        raise ScalarParseError(
            f"Scalar type {input_type.name} raised an error while parsing the provided value "
            f"{input_value}: {e}"
        ) from e

    if parse_result is Undefined:
        raise ScalarParseUndefinedError(
            f"Scalar type {input_type.name} returned an undefined result when parsing the "
            f"provided value {input_value}."
        )


def _add_enum_value_stats(
    summary: RequestSummary, input_value: Any, input_type: GraphQLEnumType
) -> None:
    """Record the enum value named by the input value, checking that it exists."""
    if not isinstance(input_value, str) or input_value not in input_type.values:
        raise InvalidEnumValueError(
            f"Enum type {input_type.name} does not have a value named by the provided value "
            f"{input_value}."
        )

    record_enum_value_usage(summary, input_type.name, input_value)


# ############
# Public API #
# ############


def add_input_value_stats(
    summary: RequestSummary, input_value: Any, input_type: GraphQLInputType
) -> None:
    """Record the input object fields and enum values used by a value of the given type.

    Args:
        summary: the summary of the request being processed, modified in place. If an error is
                 raised, it may have been partially updated and must be discarded.
        input_value: the value to inspect, as decoded from the request's variables
        input_type: GraphQL input type that the value is expected to have

    Raises:
        - RequestStatsError if the value is not valid for the given type. See the subclasses
          raised below for the specific ways in which a value may be invalid.
        - UnexpectedInputTypeError if the given type is not a GraphQL input type
    """
    if isinstance(input_type, GraphQLNonNull):
        if input_value is None:
            raise NullValueForNonNullTypeError(
                f"Non-null type {input_type} cannot be provided a null value."
            )
        add_input_value_stats(summary, input_value, input_type.of_type)
        return

    # A null value for a nullable type is valid, and does not reference anything.
    if input_value is None:
        return

    if isinstance(input_type, GraphQLList):
        item_type = input_type.of_type
        if _is_collection(input_value):
            for item_value in input_value:
                add_input_value_stats(summary, item_value, item_type)
        else:
            # Lists accept a non-list value as a list of one.
            add_input_value_stats(summary, input_value, item_type)
    elif isinstance(input_type, GraphQLInputObjectType):
        _add_input_object_value_stats(summary, input_value, input_type)
    elif isinstance(input_type, GraphQLScalarType):
        _add_scalar_value_stats(input_value, input_type)
    elif isinstance(input_type, GraphQLEnumType):
        _add_enum_value_stats(summary, input_value, input_type)
    else:
        # Not reachable. All possible input types have been considered.
        raise UnexpectedInputTypeError(f"Unexpected input type: {input_type}.")
