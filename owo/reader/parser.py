"""
  owo parser

Single pass over the token list produced by the lexer. Every
parenthesized group, including the outermost program, becomes a Python list;
numbers become int and words become Symbol. Nesting is tracked with an
explicit stack of open lists, so input depth is not bounded by the Python
call stack.
"""

from __future__ import annotations

from owo import SExpression
from owo.errors import OwoLexError, OwoParseError
from owo.reader.lexer import Token, TokenKind, LPAREN, tokenize
from owo.types.symbol import Symbol


UNMATCHED = "Parentheses pair do not match"


def parse(program: str) -> list[SExpression]:
    """Parse one complete program. It must be a single parenthesized list."""
    try:
        tokens = tokenize(program)
    except OwoLexError as e:
        raise OwoParseError(str(e)) from e

    # Consume front to back by popping from the end
    stack = tokens[::-1]
    parsed = _parse_list(stack)
    if stack:
        raise OwoParseError(f"{UNMATCHED}: unexpected {stack[-1]} after end of program")
    return parsed


def _parse_list(tokens: list[Token]) -> list[SExpression]:
    if not tokens or tokens.pop() != LPAREN:
        raise OwoParseError(f"{UNMATCHED}: program must begin with '('")

    # Lists still waiting for their closing paren, innermost last
    open_lists: list[list[SExpression]] = [[]]
    while tokens:
        token = tokens.pop()
        match token.kind:
            case TokenKind.LPAREN:
                open_lists.append([])
            case TokenKind.RPAREN:
                done = open_lists.pop()
                if not open_lists:
                    return done
                open_lists[-1].append(done)
            case TokenKind.NUMBER:
                open_lists[-1].append(token.value)
            case TokenKind.SYMBOL:
                open_lists[-1].append(Symbol(token.value))

    raise OwoParseError(f"{UNMATCHED}: missing ')'")
