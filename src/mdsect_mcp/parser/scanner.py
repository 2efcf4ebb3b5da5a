"""Character-level lexer: single special characters and plain text runs."""

from types import MappingProxyType
from typing import Optional

from .tokens import Token, TokenKind, UnscannableInputError

# Characters that always form a token on their own.
SPECIAL_CHARS = MappingProxyType({
    "_": Token(kind=TokenKind.UNDERSCORE, text="_"),
    "*": Token(kind=TokenKind.STAR, text="*"),
    "\n": Token(kind=TokenKind.NEWLINE, text="\n"),
    " ": Token(kind=TokenKind.EMPTY, text=" "),
    "#": Token.heading(1),
})


def scan_char(text: str, pos: int = 0) -> Optional[Token]:
    """
    Classify the character at ``pos``.

    Returns the token for a special character, or None when the character
    is ordinary text (or there is no character left).
    """
    if pos >= len(text):
        return None
    return SPECIAL_CHARS.get(text[pos])


def scan_text(text: str, pos: int = 0) -> Optional[Token]:
    """
    Consume the longest run of ordinary characters starting at ``pos``.

    Returns None if the run is empty, i.e. the first character is special.
    """
    end = pos
    while end < len(text) and text[end] not in SPECIAL_CHARS:
        end += 1
    if end == pos:
        return None
    return Token(kind=TokenKind.TEXT, text=text[pos:end])


# Tried in order at every position.
TOKEN_SCANNERS = (scan_char, scan_text)


def scan_one_token(text: str, pos: int) -> Token:
    """Return the first token any scanner produces at ``pos``."""
    for scanner in TOKEN_SCANNERS:
        token = scanner(text, pos)
        if token is not None:
            return token
    raise UnscannableInputError(pos, text[pos:])


def tokenize_raw(text: str) -> list[Token]:
    """
    Split text into a flat token list ending with a single EOF token.

    Headings are only ever single-``#`` tokens at this stage; see
    ``normalize_heading_runs`` for level reconstruction.
    """
    tokens: list[Token] = []
    pos = 0
    text = text or ""
    while pos < len(text):
        token = scan_one_token(text, pos)
        tokens.append(token)
        pos += len(token)
    tokens.append(Token.end_of_file())
    return tokens
