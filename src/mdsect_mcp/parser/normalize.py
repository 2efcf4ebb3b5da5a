"""Second lexical pass: turn runs of ``#`` at line start into heading tokens."""

from typing import Iterable, Optional

from .scanner import tokenize_raw
from .tokens import Token, TokenKind


def _literal(token: Token) -> Token:
    """Demote a heading marker to plain text."""
    return Token(kind=TokenKind.TEXT, text=token.text)


def normalize_heading_runs(tokens: Iterable[Token]) -> list[Token]:
    """
    Reconstruct heading levels from single-``#`` tokens.

    A run of ``#`` tokens that starts a line and is followed by a space
    becomes one ``H<n>`` token (n = run length) plus the space. A run that
    ends any other way, including at EOF, is emitted as ``n`` literal ``#``
    text tokens. A ``#`` outside such a run is always literal text.
    """
    tokens = list(tokens)
    result: list[Token] = []
    run_token: Optional[Token] = None
    run_count = 0

    for index, token in enumerate(tokens):
        at_line_start = index == 0 or tokens[index - 1].kind is TokenKind.NEWLINE

        if run_token is None:
            if at_line_start and token.is_heading():
                run_token = token
                run_count = 1
            elif token.is_heading():
                result.append(_literal(token))
            else:
                result.append(token)
            continue

        if token.same_kind(run_token):
            run_count += 1
            continue

        if token.kind is TokenKind.EMPTY:
            result.append(Token.heading(run_count))
            result.append(token)
        else:
            # Not a heading marker after all
            result.extend(_literal(run_token) for _ in range(run_count))
            result.append(_literal(token) if token.is_heading() else token)
        run_token = None
        run_count = 0

    if run_token is not None:
        result.extend(_literal(run_token) for _ in range(run_count))

    return result


def tokenize(text: str) -> list[Token]:
    """Lex text and normalize heading runs."""
    return normalize_heading_runs(tokenize_raw(text))
