"""Recursive-descent parser from surface syntax to de Bruijn terms.

Grammar::

    program     := term
    term        := IDENT | abstraction | application
    abstraction := "(" LAMBDA IDENT ("." | ":" type ".") term ")"
    application := "(" term term { term } ")"
    type        := atom [ ARROW type ]
    atom        := IDENT | "(" type ")"

Applications fold to the left: ``(f a b)`` is ``((f a) b)``. Identifiers are
resolved while parsing, so the resulting term never contains a free variable.
"""

from __future__ import annotations

from collections.abc import Mapping

from stlc.common.span import Span
from stlc.core.ast import Abstraction, Term, Variable, apply_term
from stlc.core.types import BaseType, FunctionType, Type
from stlc.errors import TermSyntaxError, UnboundVariableError
from stlc.surface.lexer import Token, tokenize

Bindings = Mapping[str, int]
"""Identifier → de Bruijn index for every binder in scope."""


def bind(ctx: Bindings, name: str) -> Bindings:
    """Return a new context with ``name`` at index 0 and every other binder one further out.

    ``ctx`` itself is left untouched, so sibling subterms parsed from it never
    observe each other's binders.
    """

    extended = {other: idx + 1 for other, idx in ctx.items()}
    extended[name] = 0
    return extended


_DESCRIPTIONS = {
    "LPAREN": "'('",
    "RPAREN": "')'",
    "LAMBDA": "'λ'",
    "DOT": "'.'",
    "COLON": "':'",
    "ARROW": "'→'",
    "IDENT": "identifier",
}


class _Parser:
    def __init__(self, source: str) -> None:
        self.source = source
        self.tokens = tokenize(source)
        self.pos = 0

    # --- Token stream ---------------------------------------------------------
    def _error(self, message: str, span: Span) -> TermSyntaxError:
        return TermSyntaxError(message, span, self.source)

    def peek(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self, expected: str) -> Token:
        tok = self.peek()
        if tok is None:
            raise self._error(
                f"Unexpected end of input, expected {expected}",
                Span.at_end(self.source),
            )
        self.pos += 1
        return tok

    def expect(self, kind: str) -> Token:
        tok = self.advance(_DESCRIPTIONS[kind])
        if tok.kind != kind:
            raise self._error(
                f"Expected {_DESCRIPTIONS[kind]}, found {tok.value!r}", tok.span
            )
        return tok

    def at_end(self) -> None:
        tok = self.peek()
        if tok is not None:
            raise self._error(f"Unexpected token {tok.value!r} after term", tok.span)

    # --- Terms ----------------------------------------------------------------
    def program(self) -> Term:
        if not self.tokens:
            raise self._error("Empty program", Span(0, 0))
        term = self.term({})
        self.at_end()
        return term

    def term(self, ctx: Bindings) -> Term:
        tok = self.advance("a term")
        if tok.kind == "IDENT":
            if tok.value not in ctx:
                raise UnboundVariableError.of(tok.value, tok.span, self.source)
            return Variable(ctx[tok.value])
        if tok.kind == "LPAREN":
            nxt = self.peek()
            if nxt is not None and nxt.kind == "LAMBDA":
                return self.abstraction(tok, ctx)
            return self.application(tok, ctx)
        raise self._error(f"Unexpected token {tok.value!r}", tok.span)

    def abstraction(self, open_tok: Token, ctx: Bindings) -> Term:
        self.expect("LAMBDA")
        name = self.expect("IDENT")
        head = self.advance("'.' or ':'")
        argument_type: Type | None = None
        if head.kind == "COLON":
            argument_type = self.type_expr()
            self.expect("DOT")
        elif head.kind != "DOT":
            raise self._error(
                f"Malformed abstraction head: expected '.' or ':', found {head.value!r}",
                head.span,
            )
        body = self.term(bind(ctx, name.value))
        self.close(open_tok)
        return Abstraction(body, argument_type)

    def application(self, open_tok: Token, ctx: Bindings) -> Term:
        terms = [self.term(ctx)]
        while (tok := self.peek()) is None or tok.kind != "RPAREN":
            if tok is None:
                raise self._error("Missing closing parenthesis", open_tok.span)
            terms.append(self.term(ctx))
        close_tok = self.close(open_tok)
        if len(terms) < 2:
            raise self._error(
                "Application needs a function and at least one argument",
                open_tok.span.merge(close_tok.span),
            )
        return apply_term(*terms)

    def close(self, open_tok: Token) -> Token:
        tok = self.peek()
        if tok is None:
            raise self._error("Missing closing parenthesis", open_tok.span)
        return self.expect("RPAREN")

    # --- Types ----------------------------------------------------------------
    def type_expr(self) -> Type:
        tok = self.advance("a type")
        atom: Type
        if tok.kind == "IDENT":
            atom = BaseType(tok.value)
        elif tok.kind == "LPAREN":
            atom = self.type_expr()
            self.close(tok)
        else:
            raise self._error(f"Expected a type, found {tok.value!r}", tok.span)
        nxt = self.peek()
        if nxt is not None and nxt.kind == "ARROW":
            self.pos += 1
            return FunctionType(atom, self.type_expr())
        return atom


def parse(source: str) -> Term:
    """Parse ``source`` into a closed term.

    Raises ``TermSyntaxError`` for malformed input and ``UnboundVariableError``
    for identifiers no enclosing abstraction binds.
    """

    return _Parser(source).program()


def parse_type(source: str) -> Type:
    """Parse a standalone type such as ``(A)→(B)→A``."""

    parser = _Parser(source)
    if not parser.tokens:
        raise parser._error("Empty type", Span(0, 0))
    ty = parser.type_expr()
    parser.at_end()
    return ty


__all__ = ["Bindings", "bind", "parse", "parse_type"]
