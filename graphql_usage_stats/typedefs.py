# Copyright 2021-present Kensho Technologies, LLC.
from dataclasses import dataclass, field
from typing import Dict

from dataclasses_json import DataClassJsonMixin, config


# All counts in this module are per-request presence flags: they are either 0 or 1, no matter
# how many times the field or enum value is referenced within the request. Summing these flags
# across many requests is left to whoever aggregates the summaries.


@dataclass
class InputFieldStat(DataClassJsonMixin):
    """Usage of one input object field within a single request."""

    # Canonical signature of the field's declared type, e.g. "[String!]".
    field_type: str = field(default="", metadata=config(field_name="fieldType"))

    # 1 if the field was provided at least once, including as null.
    request_count: int = field(default=0, metadata=config(field_name="requestCount"))

    # 1 if the field was provided as null at least once.
    request_count_null: int = field(default=0, metadata=config(field_name="requestCountNull"))


@dataclass
class InputTypeStat(DataClassJsonMixin):
    """Usage of the fields of one input object type within a single request."""

    per_input_field_stat: Dict[str, InputFieldStat] = field(
        default_factory=dict, metadata=config(field_name="perInputFieldStat")
    )


@dataclass
class EnumValueStat(DataClassJsonMixin):
    """Usage of one enum value within a single request."""

    request_count: int = field(default=0, metadata=config(field_name="requestCount"))


@dataclass
class EnumTypeStat(DataClassJsonMixin):
    """Usage of the values of one enum type within a single request."""

    per_enum_value_stat: Dict[str, EnumValueStat] = field(
        default_factory=dict, metadata=config(field_name="perEnumValueStat")
    )


@dataclass
class RequestSummary(DataClassJsonMixin):
    """Input object field and enum value usage for a single request.

    Serializes (via to_dict() and to_json()) into the camelCase mappings expected by the
    usage reporting transport.
    """

    # Input object type name -> usage of that type's fields.
    per_input_type_stat: Dict[str, InputTypeStat] = field(
        default_factory=dict, metadata=config(field_name="perInputTypeStat")
    )

    # Enum type name -> usage of that type's values.
    per_enum_type_stat: Dict[str, EnumTypeStat] = field(
        default_factory=dict, metadata=config(field_name="perEnumTypeStat")
    )

    def is_empty(self) -> bool:
        """Return True if no input field or enum value usage is recorded."""
        return not self.per_input_type_stat and not self.per_enum_type_stat
