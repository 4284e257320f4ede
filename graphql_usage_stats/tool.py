#!/usr/bin/env python
# Copyright 2021-present Kensho Technologies, LLC.
"""Utility modeled after json.tool, prints the usage statistics of a GraphQL request.

Reads a JSON request body with "query", and optionally "variables" and "operationName" keys,
from stdin, and writes the request's usage statistics as JSON to stdout.

Used as: python -m graphql_usage_stats.tool path/to/schema.graphql
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from graphql import build_ast_schema

from . import compute_request_stats
from .ast_manipulation import safe_parse_graphql


def main(argv: Optional[List[str]] = None) -> None:
    """Read a GraphQL request from standard input, and output its usage statistics."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("schema_file", help="path to the schema, in GraphQL SDL format")
    parser.add_argument(
        "--verbose", action="store_true", help="log why a request's statistics are discarded"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    with open(args.schema_file, "r") as f:
        schema = build_ast_schema(safe_parse_graphql(f.read()))

    try:
        request = json.load(sys.stdin)
    except json.JSONDecodeError as e:
        parser.error(f"could not decode the request body on stdin as JSON: {e}")
    if not isinstance(request, dict) or not isinstance(request.get("query"), str):
        parser.error('the request body must be a JSON object with a string "query" key')

    summary = compute_request_stats(
        schema,
        request["query"],
        variables=request.get("variables"),
        operation_name=request.get("operationName"),
    )

    sys.stdout.write(summary.to_json(indent=2, sort_keys=True))
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
