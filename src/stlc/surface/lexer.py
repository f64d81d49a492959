"""Tokenizer for the surface syntax of lambda terms and types."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import ply.lex as lex  # type: ignore[import-untyped]

from stlc.common.span import Span
from stlc.errors import TermSyntaxError


@dataclass(frozen=True)
class Token:
    kind: str
    value: str
    span: Span


class Lexer:
    """Token rules for ``ply.lex``.

    A fresh lexer is built for every source string, so no lexer state is
    shared between calls.
    """

    tokens = (
        "LPAREN",
        "RPAREN",
        "LAMBDA",
        "DOT",
        "COLON",
        "ARROW",
        "IDENT",
    )

    t_LPAREN = r"\("
    t_RPAREN = r"\)"
    t_LAMBDA = r"λ|\\"
    t_DOT = r"\."
    t_COLON = r":"
    t_ARROW = r"→|->"
    t_IDENT = r"[A-Za-z]+"

    t_ignore = " \t\r"
    t_ignore_COMMENT = r"\#[^\n]*"

    def __init__(self, source: str) -> None:
        self.source = source
        self._lexer = lex.lex(module=self)
        self._lexer.input(source)

    def t_newline(self, t: lex.LexToken) -> None:
        r"\n+"
        t.lexer.lineno += len(t.value)

    def t_error(self, t: lex.LexToken) -> None:
        span = Span(t.lexpos, t.lexpos + 1)
        raise TermSyntaxError(f"Unexpected character {t.value[0]!r}", span, self.source)

    def __iter__(self) -> Iterator[Token]:
        for tok in iter(self._lexer.token, None):
            yield Token(tok.type, tok.value, Span(tok.lexpos, tok.lexpos + len(tok.value)))


def tokenize(source: str) -> list[Token]:
    """Split ``source`` into tokens, raising ``TermSyntaxError`` on stray characters."""

    return list(Lexer(source))


__all__ = ["Lexer", "Token", "tokenize"]
