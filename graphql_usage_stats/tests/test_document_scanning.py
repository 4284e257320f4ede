# Copyright 2021-present Kensho Technologies, LLC.
from typing import AbstractSet, Optional
import unittest

from ..document_scanning import scan_operation_document
from ..typedefs import RequestSummary
from .test_helpers import (
    get_enum_type_stats,
    get_input_type_stats,
    get_schema,
    make_input_field_stat_dict,
    parse_operation,
)


class DocumentScanningTests(unittest.TestCase):
    def setUp(self) -> None:
        """Initialize the test schema."""
        self.schema = get_schema()

    def _scan(
        self,
        graphql_query: str,
        null_variable_names: AbstractSet[str] = frozenset(),
        operation_name: Optional[str] = None,
    ) -> RequestSummary:
        """Return a new summary with the stats of the literals in the selected operation."""
        document, operation = parse_operation(graphql_query, operation_name)
        summary = RequestSummary()
        scan_operation_document(summary, self.schema, document, operation, null_variable_names)
        return summary

    def test_enum_argument_literal(self) -> None:
        summary = self._scan(
            """{
            Animals(color: RED) {
                name
            }
        }"""
        )

        self.assertEqual(
            {"Color": {"perEnumValueStat": {"RED": {"requestCount": 1}}}},
            get_enum_type_stats(summary),
        )
        self.assertEqual({}, get_input_type_stats(summary))

    def test_input_object_literal(self) -> None:
        summary = self._scan(
            """{
            Animals(filter: {name: "Beethoven", color: GREEN, range: {low: 1}}, size: LARGE) {
                name
            }
        }"""
        )

        expected_input_type_stats = {
            "AnimalFilter": {
                "perInputFieldStat": {
                    "name": make_input_field_stat_dict("String"),
                    "color": make_input_field_stat_dict("Color"),
                    "range": make_input_field_stat_dict("Range"),
                }
            },
            "Range": {"perInputFieldStat": {"low": make_input_field_stat_dict("Int!")}},
        }
        expected_enum_type_stats = {
            "Color": {"perEnumValueStat": {"GREEN": {"requestCount": 1}}},
            "Size": {"perEnumValueStat": {"LARGE": {"requestCount": 1}}},
        }
        self.assertEqual(expected_input_type_stats, get_input_type_stats(summary))
        self.assertEqual(expected_enum_type_stats, get_enum_type_stats(summary))

    def test_list_literals(self) -> None:
        summary = self._scan(
            """{
            Animals(filter: {colors: [RED, BLUE], filters: [{name: "a"}, {tags: ["b"]}]}) {
                name
            }
        }"""
        )

        expected_input_type_stats = {
            "AnimalFilter": {
                "perInputFieldStat": {
                    "colors": make_input_field_stat_dict("[Color!]"),
                    "filters": make_input_field_stat_dict("[Filter]"),
                }
            },
            "Filter": {
                "perInputFieldStat": {
                    "name": make_input_field_stat_dict("String"),
                    "tags": make_input_field_stat_dict("[String!]"),
                }
            },
        }
        expected_enum_type_stats = {
            "Color": {"perEnumValueStat": {"RED": {"requestCount": 1}, "BLUE": {"requestCount": 1}}}
        }
        self.assertEqual(expected_input_type_stats, get_input_type_stats(summary))
        self.assertEqual(expected_enum_type_stats, get_enum_type_stats(summary))

    def test_null_literal(self) -> None:
        summary = self._scan(
            """{
            Animals(filter: {name: null, color: null}) {
                name
            }
        }"""
        )

        expected_input_type_stats = {
            "AnimalFilter": {
                "perInputFieldStat": {
                    "name": make_input_field_stat_dict("String", request_count_null=1),
                    "color": make_input_field_stat_dict("Color", request_count_null=1),
                }
            },
        }
        self.assertEqual(expected_input_type_stats, get_input_type_stats(summary))
        self.assertEqual({}, get_enum_type_stats(summary))

    def test_variable_in_input_object_literal(self) -> None:
        graphql_query = """
        query Animals($name: String, $color: Color) {
            Animals(filter: {name: $name, color: $color}) {
                name
            }
        }"""

        summary = self._scan(graphql_query, null_variable_names={"name"})
        expected_input_type_stats = {
            "AnimalFilter": {
                "perInputFieldStat": {
                    "name": make_input_field_stat_dict("String", request_count_null=1),
                    "color": make_input_field_stat_dict("Color"),
                }
            },
        }
        self.assertEqual(expected_input_type_stats, get_input_type_stats(summary))

        summary = self._scan(graphql_query, null_variable_names=set())
        self.assertEqual(
            make_input_field_stat_dict("String"),
            get_input_type_stats(summary)["AnimalFilter"]["perInputFieldStat"]["name"],
        )

    def test_null_occurrence_is_kept_across_occurrences(self) -> None:
        summary = self._scan(
            """{
            Animals(filter: {name: null}) { name }
            other: Animals(filter: {name: "a"}) { name }
        }"""
        )

        self.assertEqual(
            make_input_field_stat_dict("String", request_count_null=1),
            get_input_type_stats(summary)["AnimalFilter"]["perInputFieldStat"]["name"],
        )

    def test_variable_default_value_literal(self) -> None:
        summary = self._scan(
            """
        query Animals($color: Color = BLUE) {
            Animals(color: $color) {
                name
            }
        }"""
        )

        self.assertEqual(
            {"Color": {"perEnumValueStat": {"BLUE": {"requestCount": 1}}}},
            get_enum_type_stats(summary),
        )

    def test_only_fragments_used_by_the_operation_are_scanned(self) -> None:
        graphql_query = """
        query RedAnimals {
            ...RedAnimalFields
        }

        query LargeAnimals {
            ...LargeAnimalFields
        }

        fragment RedAnimalFields on RootSchemaQuery {
            Animals(color: RED) {
                ...AnimalSizeFields
            }
        }

        fragment LargeAnimalFields on RootSchemaQuery {
            Animals(size: LARGE) {
                name
            }
        }

        fragment AnimalSizeFields on Animal {
            name
            size
            ... on Animal {
                color
            }
        }

        fragment UnusedFields on RootSchemaQuery {
            Animals(color: GREEN) {
                name
            }
        }"""
        summary = self._scan(graphql_query, operation_name="RedAnimals")

        self.assertEqual(
            {"Color": {"perEnumValueStat": {"RED": {"requestCount": 1}}}},
            get_enum_type_stats(summary),
        )

        summary = self._scan(graphql_query, operation_name="LargeAnimals")
        self.assertEqual(
            {"Size": {"perEnumValueStat": {"LARGE": {"requestCount": 1}}}},
            get_enum_type_stats(summary),
        )
