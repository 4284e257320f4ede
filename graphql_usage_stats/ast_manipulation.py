# Copyright 2019-present Kensho Technologies, LLC.
from typing import AbstractSet, List, Optional

from graphql.error import GraphQLSyntaxError
from graphql.language.ast import (
    DocumentNode,
    NullValueNode,
    OperationDefinitionNode,
    ValueNode,
    VariableDefinitionNode,
    VariableNode,
)
from graphql.language.parser import parse

from .exceptions import GraphQLParsingError, InvalidOperationSelectionError


def get_ast_variable_name(variable_definition: VariableDefinitionNode) -> str:
    """Return the name of the variable declared by the given variable definition."""
    return variable_definition.variable.name.value


def get_operation_name_or_empty(operation: OperationDefinitionNode) -> str:
    """Return the operation's name, or the empty string if the operation is anonymous."""
    if operation.name is None:
        return ""
    return operation.name.value


def is_null_value_ast(value_ast: Optional[ValueNode]) -> bool:
    """Return True if the AST is an explicit null literal."""
    return isinstance(value_ast, NullValueNode)


def is_variable_reference_to(value_ast: ValueNode, variable_names: AbstractSet[str]) -> bool:
    """Return True if the AST is a reference to one of the given variable names."""
    return isinstance(value_ast, VariableNode) and value_ast.name.value in variable_names


def safe_parse_graphql(graphql_string: str) -> DocumentNode:
    """Return an AST representation of the given GraphQL input, reraising GraphQL library errors."""
    try:
        ast = parse(graphql_string)
    except GraphQLSyntaxError as e:
        raise GraphQLParsingError(e) from e

    return ast


def get_operation_definition(
    document_ast: DocumentNode, operation_name: Optional[str] = None
) -> OperationDefinitionNode:
    """Return the operation with the given name, or the document's only operation if not named.

    Args:
        document_ast: parsed GraphQL document, possibly with multiple operations and fragments
        operation_name: optional name of the operation to select. Must be given if the document
                        defines more than one operation.

    Returns:
        the selected OperationDefinitionNode

    Raises:
        - InvalidOperationSelectionError if there is no operation matching the request
    """
    if not isinstance(document_ast, DocumentNode):
        raise AssertionError(
            'Received an unexpected value for "document_ast": {}'.format(document_ast)
        )

    operations: List[OperationDefinitionNode] = [
        definition
        for definition in document_ast.definitions
        if isinstance(definition, OperationDefinitionNode)
    ]

    if operation_name is None:
        if len(operations) != 1:
            raise InvalidOperationSelectionError(
                "Expected a GraphQL document with exactly one operation when no operation name "
                "is given, but found {} operations.".format(len(operations))
            )
        return operations[0]

    for operation in operations:
        if operation.name is not None and operation.name.value == operation_name:
            return operation

    raise InvalidOperationSelectionError(
        'No operation named "{}" was found in the GraphQL document. Found operations: {}'.format(
            operation_name, [get_operation_name_or_empty(operation) for operation in operations]
        )
    )
