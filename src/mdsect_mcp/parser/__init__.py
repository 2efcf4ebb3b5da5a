"""Markdown heading parsing and path queries."""

from .tokens import InvalidTokenError, Token, TokenKind, UnscannableInputError
from .scanner import tokenize_raw
from .normalize import normalize_heading_runs, tokenize
from .hierarchy import HTree, build_heading_tree, parse_document, render_tree, tree_to_dict
from .query import QueryStep, format_results, heading_steps, parse_steps, query_tree

__all__ = [
    "InvalidTokenError",
    "Token",
    "TokenKind",
    "UnscannableInputError",
    "tokenize_raw",
    "normalize_heading_runs",
    "tokenize",
    "HTree",
    "build_heading_tree",
    "parse_document",
    "render_tree",
    "tree_to_dict",
    "QueryStep",
    "format_results",
    "heading_steps",
    "parse_steps",
    "query_tree",
]
