# Copyright 2021-present Kensho Technologies, LLC.
"""Compute per-request usage statistics of input object fields and enum values.

These statistics tell whether an operation uses a given enum value or input object field, and
whether it supplies null at least once for that field. That in turn tells which schema changes
are safe: removing an input object field, making an input object field non-nullable, or removing
an enum value. Operation signatures hide literals and don't include variable structure, so this
information has to be summarized per request.
"""
import logging
from typing import Any, Mapping, Optional

from graphql import GraphQLSchema
from graphql.language.ast import DocumentNode, OperationDefinitionNode

from .ast_manipulation import get_operation_definition, safe_parse_graphql
from .document_scanning import scan_operation_document
from .exceptions import RequestStatsError
from .stats_aggregation import clear_request_summary, merge_request_summary
from .typedefs import RequestSummary
from .variable_classification import classify_variables


logger = logging.getLogger(__name__)


def add_request_stats(
    summary: RequestSummary,
    schema: GraphQLSchema,
    document: DocumentNode,
    operation: OperationDefinitionNode,
    variables: Optional[Mapping[str, Any]],
) -> None:
    """Record the request's input object field and enum value usage into the summary.

    Variable values are inspected first, then the literals of the operation and of the fragments
    it uses. Statistics are collected into a separate summary and only merged into the given one
    once the whole request has been inspected. If the request turns out to be invalid, for example
    because its variable values don't match their declared types, the given summary's statistics
    are discarded instead: invalid requests say nothing about which schema changes are safe.

    This function never raises. A failure to collect statistics must not fail the request itself,
    so the outcome is only communicated through the contents of the summary.

    Args:
        summary: summary to populate, modified in place. Both of its mappings are left empty if
                 the request is found to be invalid.
        schema: the schema the request is executed against
        document: the request's document, already validated against the schema. Variable values
                  are not expected to have been validated.
        operation: the operation that the request executes, one of the document's definitions
        variables: the variable values provided with the request, if any
    """
    request_summary = RequestSummary()
    try:
        null_variable_names = classify_variables(request_summary, schema, operation, variables)
        scan_operation_document(request_summary, schema, document, operation, null_variable_names)
    except RequestStatsError as e:
        logger.debug("Discarding usage statistics of invalid request: %s", e)
        clear_request_summary(summary)
        return
    except Exception:
        logger.warning(
            "Unexpected error while collecting usage statistics, discarding them.", exc_info=True
        )
        clear_request_summary(summary)
        return

    merge_request_summary(summary, request_summary)


def compute_request_stats(
    schema: GraphQLSchema,
    graphql_query: str,
    variables: Optional[Mapping[str, Any]] = None,
    operation_name: Optional[str] = None,
) -> RequestSummary:
    """Parse the query and return the usage statistics of the selected operation's request.

    Args:
        schema: the schema the request is executed against
        graphql_query: str, GraphQL document that validates against the schema
        variables: the variable values provided with the request, if any
        operation_name: name of the operation to execute. May be omitted if the document contains
                        exactly one operation.

    Returns:
        RequestSummary with the request's statistics. It is empty if the request is invalid.

    Raises:
        - GraphQLParsingError if the query cannot be parsed
        - InvalidOperationSelectionError if the operation to execute cannot be determined
    """
    document = safe_parse_graphql(graphql_query)
    operation = get_operation_definition(document, operation_name)

    summary = RequestSummary()
    add_request_stats(summary, schema, document, operation, variables)
    return summary
