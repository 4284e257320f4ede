# Copyright 2021-present Kensho Technologies, LLC.
"""Collect usage statistics from the input object fields and enum values written in a document."""
from typing import AbstractSet, Any, List

from graphql import GraphQLSchema, TypeInfo, TypeInfoVisitor, Visitor, get_named_type, visit
from graphql.language.ast import (
    DocumentNode,
    EnumValueNode,
    ObjectFieldNode,
    OperationDefinitionNode,
)
from graphql.utilities import separate_operations

from .ast_manipulation import (
    get_operation_name_or_empty,
    is_null_value_ast,
    is_variable_reference_to,
)
from .stats_aggregation import record_enum_value_usage, record_input_field_usage
from .typedefs import RequestSummary


class RequestStatsVisitor(Visitor):
    def __init__(
        self,
        type_info: TypeInfo,
        summary: RequestSummary,
        null_variable_names: AbstractSet[str],
    ) -> None:
        """Create a visitor that records input field and enum value literals into the summary.

        Args:
            type_info: Used to keep track of the input types of values while traversing the AST.
                       The visitor must be wrapped in a TypeInfoVisitor using the same TypeInfo.
            summary: the summary of the request being processed, modified in place
            null_variable_names: names of the variables whose effective value is null
        """
        super().__init__()
        self.type_info = type_info
        self.summary = summary
        self.null_variable_names = null_variable_names

    def enter_object_field(
        self, node: ObjectFieldNode, key: Any, parent: Any, path: List[Any], ancestors: List[Any]
    ) -> None:
        """Record the input object field, and whether its value is null."""
        # The operation has already been validated, so the input types are always known here.
        # When entering an object field, TypeInfo reports the field's declared type as the
        # input type, and the input object type declaring the field as the parent input type.
        parent_input_type = self.type_info.get_parent_input_type()
        input_type = self.type_info.get_input_type()
        if parent_input_type is None or input_type is None:
            raise AssertionError(
                f"Expected input types to be known for object field {node.name.value}, but got "
                f"parent input type {parent_input_type} and input type {input_type}. The "
                f"document may be invalid against the schema."
            )

        is_null = is_null_value_ast(node.value) or is_variable_reference_to(
            node.value, self.null_variable_names
        )
        record_input_field_usage(
            self.summary,
            get_named_type(parent_input_type).name,
            node.name.value,
            str(input_type),
            is_null,
        )

    def enter_enum_value(
        self, node: EnumValueNode, key: Any, parent: Any, path: List[Any], ancestors: List[Any]
    ) -> None:
        """Record the enum value."""
        input_type = self.type_info.get_input_type()
        if input_type is None:
            raise AssertionError(
                f"Expected the input type to be known for enum value {node.value}. The document "
                f"may be invalid against the schema."
            )

        record_enum_value_usage(self.summary, get_named_type(input_type).name, node.value)


# ############
# Public API #
# ############


def scan_operation_document(
    summary: RequestSummary,
    schema: GraphQLSchema,
    document: DocumentNode,
    operation: OperationDefinitionNode,
    null_variable_names: AbstractSet[str],
) -> None:
    """Record the input object fields and enum values written in the operation's literals.

    Only the operation itself and the fragments it transitively uses are scanned, since other
    operations and unused fragments in the document are not executed by the request.

    Args:
        summary: the summary of the request being processed, modified in place
        schema: the schema against which the document has been validated
        document: the request's document, which may contain other operations and fragments
        operation: the operation that the request executes, one of the document's definitions
        null_variable_names: names of the variables whose effective value is null
    """
    operation_document = separate_operations(document)[get_operation_name_or_empty(operation)]

    type_info = TypeInfo(schema)
    visitor = TypeInfoVisitor(
        type_info, RequestStatsVisitor(type_info, summary, null_variable_names)
    )
    visit(operation_document, visitor)
