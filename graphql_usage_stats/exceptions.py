# Copyright 2021-present Kensho Technologies, LLC.
class GraphQLUsageStatsError(Exception):
    """Generic error when computing GraphQL usage statistics."""


class GraphQLParsingError(GraphQLUsageStatsError):
    """Exception raised when the provided GraphQL string could not be parsed."""


class InvalidOperationSelectionError(GraphQLUsageStatsError):
    """Exception raised when the requested operation cannot be selected from the document.

    For example:
    - the document has no operation with the requested name;
    - no operation name was given, but the document defines more than one operation;
    - the document defines no operations at all.
    """


class RequestStatsError(GraphQLUsageStatsError):
    """Exception raised when a request is found to be invalid while collecting its statistics.

    Statistics are only meaningful for valid requests, so any subclass of this error causes
    all statistics collected for the request so far to be discarded.
    """


class NullValueForNonNullTypeError(RequestStatsError):
    """Exception raised when a null value is provided for a non-null input type."""


class NonObjectValueError(RequestStatsError):
    """Exception raised when a non-mapping value is provided for an input object type."""


class MissingRequiredInputFieldError(RequestStatsError):
    """Exception raised when a non-null input field with no default value is not provided."""


class UnknownInputFieldError(RequestStatsError):
    """Exception raised when a provided input object value has a field its type doesn't declare."""


class ScalarParseError(RequestStatsError):
    """Exception raised when a scalar type raised an error while parsing the provided value."""


class ScalarParseUndefinedError(RequestStatsError):
    """Exception raised when a scalar type parsed the provided value into an undefined result."""


class InvalidEnumValueError(RequestStatsError):
    """Exception raised when the provided value does not name a member of the enum type."""


class UnresolvableVariableTypeError(RequestStatsError):
    """Exception raised when a variable's declared type is not an input type in the schema."""


class MissingRequiredVariableError(RequestStatsError):
    """Exception raised when a non-null variable with no default value is not provided."""


class NullValueForNonNullVariableError(RequestStatsError):
    """Exception raised when a null value is provided for a non-null variable."""


class UnexpectedInputTypeError(GraphQLUsageStatsError):
    """Exception raised when a value is checked against a type that is not a GraphQL input type.

    All GraphQL input types are non-null and list wrappers, input objects, scalars and enums,
    so this indicates a broken contract with the schema rather than an invalid request, and
    is therefore not a RequestStatsError.
    """
