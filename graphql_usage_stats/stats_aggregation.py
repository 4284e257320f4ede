# Copyright 2021-present Kensho Technologies, LLC.
"""Record input field and enum value occurrences into a RequestSummary."""
from .typedefs import EnumTypeStat, EnumValueStat, InputFieldStat, InputTypeStat, RequestSummary


def _get_or_create_input_field_stat(
    summary: RequestSummary, input_object_type_name: str, input_field_name: str
) -> InputFieldStat:
    """Return the stat for the given input field, adding an empty one if there isn't one yet."""
    input_type_stat = summary.per_input_type_stat.setdefault(
        input_object_type_name, InputTypeStat()
    )
    return input_type_stat.per_input_field_stat.setdefault(input_field_name, InputFieldStat())


def _get_or_create_enum_value_stat(
    summary: RequestSummary, enum_type_name: str, enum_value_name: str
) -> EnumValueStat:
    """Return the stat for the given enum value, adding an empty one if there isn't one yet."""
    enum_type_stat = summary.per_enum_type_stat.setdefault(enum_type_name, EnumTypeStat())
    return enum_type_stat.per_enum_value_stat.setdefault(enum_value_name, EnumValueStat())


# ############
# Public API #
# ############


def record_input_field_usage(
    summary: RequestSummary,
    input_object_type_name: str,
    input_field_name: str,
    input_field_type_name: str,
    is_null: bool,
) -> None:
    """Mark the input field as used by the request, and as used with a null value if is_null.

    Recording is idempotent: the stat's counts are presence flags, so recording the same field
    again never raises them above 1. A null occurrence is never undone by a later non-null one.

    Args:
        summary: the summary of the request being processed, modified in place
        input_object_type_name: name of the input object type that declares the field
        input_field_name: name of the field within that input object type
        input_field_type_name: canonical signature of the field's declared type, e.g. "[Int!]"
        is_null: whether this occurrence of the field provides a null value
    """
    input_field_stat = _get_or_create_input_field_stat(
        summary, input_object_type_name, input_field_name
    )
    input_field_stat.field_type = input_field_type_name
    input_field_stat.request_count = 1
    if is_null:
        input_field_stat.request_count_null = 1


def record_enum_value_usage(
    summary: RequestSummary, enum_type_name: str, enum_value_name: str
) -> None:
    """Mark the enum value as used by the request. Idempotent, like record_input_field_usage."""
    _get_or_create_enum_value_stat(summary, enum_type_name, enum_value_name).request_count = 1


def merge_request_summary(target: RequestSummary, source: RequestSummary) -> None:
    """Record every occurrence in the source summary into the target summary, in place.

    Presence flags are combined with a logical OR, so merging is idempotent and never produces
    counts above 1. This is meant for committing the statistics of a single request, not for
    aggregating statistics across requests.
    """
    for input_object_type_name, input_type_stat in source.per_input_type_stat.items():
        for input_field_name, source_field_stat in input_type_stat.per_input_field_stat.items():
            target_field_stat = _get_or_create_input_field_stat(
                target, input_object_type_name, input_field_name
            )
            target_field_stat.field_type = source_field_stat.field_type
            target_field_stat.request_count = max(
                target_field_stat.request_count, source_field_stat.request_count
            )
            target_field_stat.request_count_null = max(
                target_field_stat.request_count_null, source_field_stat.request_count_null
            )

    for enum_type_name, enum_type_stat in source.per_enum_type_stat.items():
        for enum_value_name, source_value_stat in enum_type_stat.per_enum_value_stat.items():
            target_value_stat = _get_or_create_enum_value_stat(
                target, enum_type_name, enum_value_name
            )
            target_value_stat.request_count = max(
                target_value_stat.request_count, source_value_stat.request_count
            )


def clear_request_summary(summary: RequestSummary) -> None:
    """Discard all statistics in the summary, leaving both of its mappings empty."""
    summary.per_input_type_stat = {}
    summary.per_enum_type_stat = {}
