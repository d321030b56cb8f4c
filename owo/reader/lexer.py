"""
  owo lexer

- Eager: the whole program is tokenized up front into a list.
- Parentheses are always standalone tokens, even without surrounding spaces.
- Any other whitespace-delimited word is either a signed 64-bit integer or a
  symbol. There is no quoting, escaping or string syntax.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple, Optional

from owo import INT64_MIN, INT64_MAX
from owo.errors import OwoLexError


NUMBER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


class TokenKind(Enum):
    NUMBER = "number"
    SYMBOL = "symbol"
    LPAREN = "lparen"
    RPAREN = "rparen"


class Token(NamedTuple):
    kind: TokenKind
    value: Optional[int | str] = None

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return f"Number({self.value})"
        if self.kind is TokenKind.SYMBOL:
            return f"Symbol({self.value})"
        return "(" if self.kind is TokenKind.LPAREN else ")"


LPAREN = Token(TokenKind.LPAREN)
RPAREN = Token(TokenKind.RPAREN)


def _parse_int64(word: str) -> Optional[int]:
    if not NUMBER_RE.fullmatch(word):
        return None
    n = int(word)
    if n < INT64_MIN or n > INT64_MAX:
        # Out of range words fall through to symbols
        return None
    return n


def _classify(word: str) -> Token:
    if word == "(":
        return LPAREN
    if word == ")":
        return RPAREN
    n = _parse_int64(word)
    if n is not None:
        return Token(TokenKind.NUMBER, n)
    if not word:
        raise OwoLexError(word)
    return Token(TokenKind.SYMBOL, word)


def tokenize(program: str) -> list[Token]:
    """Split `program` into a flat list of tokens."""
    padded = program.replace("(", " ( ").replace(")", " ) ")
    return [_classify(word) for word in padded.split()]
