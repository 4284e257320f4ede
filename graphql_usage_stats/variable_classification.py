# Copyright 2021-present Kensho Technologies, LLC.
"""Collect usage statistics from a request's variable values.

This follows the structure of variable value coercion in graphql-core, because the variable
values have not been validated yet when statistics are collected.
"""
from typing import Any, Mapping, Optional, Set

from graphql import GraphQLNonNull, GraphQLSchema, is_input_type, print_ast, type_from_ast
from graphql.language.ast import OperationDefinitionNode

from .ast_manipulation import get_ast_variable_name, is_null_value_ast
from .exceptions import (
    MissingRequiredVariableError,
    NullValueForNonNullVariableError,
    UnresolvableVariableTypeError,
)
from .input_value_traversal import add_input_value_stats
from .typedefs import RequestSummary


def classify_variables(
    summary: RequestSummary,
    schema: GraphQLSchema,
    operation: OperationDefinitionNode,
    variables: Optional[Mapping[str, Any]],
) -> Set[str]:
    """Record the usage statistics of the provided variable values, and find the null variables.

    Args:
        summary: the summary of the request being processed, modified in place. If an error is
                 raised, it may have been partially updated and must be discarded.
        schema: the schema against which the operation's variable types are resolved
        operation: the operation whose declared variables to inspect
        variables: the variable values provided with the request, if any

    Returns:
        set of names of the declared variables whose effective value is null in this request,
        either because null was provided, or because no value was provided and the variable
        has no default value or a null default value

    Raises:
        - RequestStatsError if any variable value is missing, has a type that can't be resolved,
          or is invalid for the variable's declared type
    """
    null_variable_names: Set[str] = set()

    for variable_definition in operation.variable_definitions or []:
        variable_name = get_ast_variable_name(variable_definition)

        variable_type = type_from_ast(schema, variable_definition.type)
        if variable_type is None or not is_input_type(variable_type):
            raise UnresolvableVariableTypeError(
                f"Variable ${variable_name} is declared with type "
                f"{print_ast(variable_definition.type)}, which is not an input type in the schema."
            )

        if variables is None or variable_name not in variables:
            default_value = variable_definition.default_value
            if default_value is None and isinstance(variable_type, GraphQLNonNull):
                raise MissingRequiredVariableError(
                    f"Variable ${variable_name} of non-null type {variable_type} has no default "
                    f"value, but no value was provided for it."
                )
            if default_value is None or is_null_value_ast(default_value):
                null_variable_names.add(variable_name)
            continue

        variable_value = variables[variable_name]
        if variable_value is None:
            if isinstance(variable_type, GraphQLNonNull):
                raise NullValueForNonNullVariableError(
                    f"Variable ${variable_name} of non-null type {variable_type} cannot be "
                    f"provided a null value."
                )
            null_variable_names.add(variable_name)

        add_input_value_stats(summary, variable_value, variable_type)

    return null_variable_names
