"""Parser for statements, terms and types."""

from __future__ import annotations

from typing import Any, cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from sysf.common.span import Span
from sysf.surface.errors import ParseError
from sysf.surface.sast import SApp, SLam, STApp, STArrow, STForall, STLam, STVar, STerm, SType, SVar
from sysf.surface.sstmt import (
    SAxiom,
    SClear,
    SDefine,
    SPrint,
    SReduce,
    SStatement,
    STheorem,
    SVariable,
)

_SOURCE: str = ""

reserved = {
    "fun": "FUN",
    "fun2": "FUN2",
    "forall": "FORALL",
    "Variable": "VARIABLE",
    "Axiom": "AXIOM",
    "Hypothesis": "AXIOM",
    "Theorem": "THEOREM",
    "Lemma": "THEOREM",
    "Corollary": "THEOREM",
    "Define": "DEFINE",
    "Reduce": "REDUCE",
    "Print": "PRINT",
    "Clear": "CLEAR",
}

_unicode = {"λ": "FUN", "Λ": "FUN2", "∀": "FORALL"}

tokens = (
    "IDENT",
    "ARROW",
    "DOT",
    "COLON",
    "COMMA",
    "EQUALS",
    "LPAREN",
    "RPAREN",
    "LBRACKET",
    "RBRACKET",
    "SEMI",
    *sorted(set(reserved.values())),
)

states = (("comment", "exclusive"),)

t_ARROW = r"->|→"
t_DOT = r"\."
t_COLON = r":"
t_COMMA = r","
t_EQUALS = r"="
t_LPAREN = r"\("
t_RPAREN = r"\)"
t_LBRACKET = r"\["
t_RBRACKET = r"\]"
t_SEMI = r";"

t_ignore = " \t\r"
t_comment_ignore = ""


def _tok_span(tok: lex.LexToken) -> Span:
    return Span.locate(_SOURCE, tok.lexpos, tok.lexpos + len(str(tok.value)))


# ---- lexer -------------------------------------------------------------------


def t_begin_comment(t: lex.LexToken) -> None:
    r"\(\*"
    t.lexer.comment_depth = 1
    t.lexer.comment_start = t.lexpos
    t.lexer.begin("comment")


def t_comment_open(t: lex.LexToken) -> None:
    r"\(\*"
    t.lexer.comment_depth += 1


def t_comment_close(t: lex.LexToken) -> None:
    r"\*\)"
    t.lexer.comment_depth -= 1
    if t.lexer.comment_depth == 0:
        t.lexer.begin("INITIAL")


def t_comment_newline(t: lex.LexToken) -> None:
    r"\n+"
    t.lexer.lineno += len(t.value)


def t_comment_body(t: lex.LexToken) -> None:
    r"[^(*\n]+|[(*]"


def t_comment_eof(t: lex.LexToken) -> None:
    start = t.lexer.comment_start
    raise ParseError("unterminated comment", Span.locate(_SOURCE, start, start + 2), _SOURCE)


def t_comment_error(t: lex.LexToken) -> None:
    t.lexer.skip(1)


def t_newline(t: lex.LexToken) -> None:
    r"\n+"
    t.lexer.lineno += len(t.value)


def t_UNICODE(t: lex.LexToken) -> lex.LexToken:
    r"[λΛ∀]"
    t.type = _unicode[t.value]
    return t


def t_IDENT(t: lex.LexToken) -> lex.LexToken:
    r"[A-Za-z][A-Za-z0-9_']*"
    t.type = reserved.get(t.value, "IDENT")
    return t


def t_error(t: lex.LexToken) -> None:
    span = Span.locate(_SOURCE, t.lexpos, t.lexpos + 1)
    raise ParseError(f"unexpected character {t.value[0]!r}", span, _SOURCE)


# ---- grammar -----------------------------------------------------------------


def _item_span(p: yacc.YaccProduction, index: int) -> Span:
    value = p[index]
    span = getattr(value, "span", None)
    if isinstance(span, Span):
        return span
    return _tok_span(cast(lex.LexToken, p.slice[index]))


def _span(p: yacc.YaccProduction, start: int, end: int) -> Span:
    return _item_span(p, start).join(_item_span(p, end))


def p_program(p: yacc.YaccProduction) -> None:
    "program : items"
    p[0] = p[1]


def p_program_unterminated(p: yacc.YaccProduction) -> None:
    "program : items statement"
    p[0] = p[1] + (p[2],)


def p_items_empty(p: yacc.YaccProduction) -> None:
    "items : empty"
    p[0] = ()


def p_items_statement(p: yacc.YaccProduction) -> None:
    "items : items statement SEMI"
    p[0] = p[1] + (p[2],)


def p_items_semi(p: yacc.YaccProduction) -> None:
    "items : items SEMI"
    p[0] = p[1]


def p_statement_variable(p: yacc.YaccProduction) -> None:
    "statement : VARIABLE IDENT"
    p[0] = SVariable(p[2], span=_span(p, 1, 2))


def p_statement_axiom(p: yacc.YaccProduction) -> None:
    "statement : AXIOM IDENT COLON type"
    p[0] = SAxiom(p[2], p[4], span=_span(p, 1, 4))


def p_statement_theorem(p: yacc.YaccProduction) -> None:
    """statement : THEOREM IDENT COLON type EQUALS term
    | DEFINE IDENT COLON type EQUALS term"""
    p[0] = STheorem(p[2], p[4], p[6], span=_span(p, 1, 6))


def p_statement_define(p: yacc.YaccProduction) -> None:
    "statement : DEFINE IDENT EQUALS term"
    p[0] = SDefine(p[2], p[4], span=_span(p, 1, 4))


def p_statement_reduce(p: yacc.YaccProduction) -> None:
    "statement : REDUCE term"
    p[0] = SReduce(p[2], span=_span(p, 1, 2))


def p_statement_print(p: yacc.YaccProduction) -> None:
    "statement : PRINT IDENT"
    p[0] = SPrint(p[2], span=_span(p, 1, 2))


def p_statement_clear(p: yacc.YaccProduction) -> None:
    "statement : CLEAR"
    p[0] = SClear(span=_span(p, 1, 1))


def p_type_forall(p: yacc.YaccProduction) -> None:
    "type : FORALL ident_list DOT type"
    span = _span(p, 1, 4)
    body = p[4]
    for name in reversed(p[2]):
        body = STForall(name, body, span=span)
    p[0] = body


def p_type_arrow(p: yacc.YaccProduction) -> None:
    "type : atype ARROW type"
    p[0] = STArrow(p[1], p[3], span=_span(p, 1, 3))


def p_type_atom(p: yacc.YaccProduction) -> None:
    "type : atype"
    p[0] = p[1]


def p_atype_var(p: yacc.YaccProduction) -> None:
    "atype : IDENT"
    p[0] = STVar(p[1], span=_span(p, 1, 1))


def p_atype_paren(p: yacc.YaccProduction) -> None:
    "atype : LPAREN type RPAREN"
    p[0] = p[2]


def p_ident_list_single(p: yacc.YaccProduction) -> None:
    "ident_list : IDENT"
    p[0] = (p[1],)


def p_ident_list_multi(p: yacc.YaccProduction) -> None:
    "ident_list : ident_list COMMA IDENT"
    p[0] = p[1] + (p[3],)


def p_term_fun(p: yacc.YaccProduction) -> None:
    "term : FUN params DOT term"
    span = _span(p, 1, 4)
    body = p[4]
    for name, ty in reversed(p[2]):
        body = SLam(name, ty, body, span=span)
    p[0] = body


def p_term_fun2(p: yacc.YaccProduction) -> None:
    "term : FUN2 ident_list DOT term"
    span = _span(p, 1, 4)
    body = p[4]
    for name in reversed(p[2]):
        body = STLam(name, body, span=span)
    p[0] = body


def p_term_app(p: yacc.YaccProduction) -> None:
    "term : app"
    p[0] = p[1]


def p_params_single(p: yacc.YaccProduction) -> None:
    "params : param"
    p[0] = (p[1],)


def p_params_multi(p: yacc.YaccProduction) -> None:
    "params : params COMMA param"
    p[0] = p[1] + (p[3],)


def p_param(p: yacc.YaccProduction) -> None:
    "param : IDENT COLON type"
    p[0] = (p[1], p[3])


def p_app_term(p: yacc.YaccProduction) -> None:
    "app : app fterm"
    p[0] = SApp(p[1], p[2], span=_span(p, 1, 2))


def p_app_type(p: yacc.YaccProduction) -> None:
    "app : app LBRACKET type RBRACKET"
    p[0] = STApp(p[1], p[3], span=_span(p, 1, 4))


def p_app_head(p: yacc.YaccProduction) -> None:
    "app : fterm"
    p[0] = p[1]


def p_fterm_var(p: yacc.YaccProduction) -> None:
    "fterm : IDENT"
    p[0] = SVar(p[1], span=_span(p, 1, 1))


def p_fterm_paren(p: yacc.YaccProduction) -> None:
    "fterm : LPAREN term RPAREN"
    p[0] = p[2]


def p_empty(p: yacc.YaccProduction) -> None:
    "empty :"
    p[0] = ()


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        span = Span.locate(_SOURCE, len(_SOURCE), len(_SOURCE))
        raise ParseError("unexpected end of input", span, _SOURCE)
    raise ParseError(f"unexpected token {p.value!r}", _tok_span(p), _SOURCE)


_PARSERS: dict[str, Any] = {}


def _parse(source: str, start: str) -> Any:
    global _SOURCE
    _SOURCE = source
    lexer = lex.lex()
    parser = _PARSERS.get(start)
    if parser is None:
        parser = yacc.yacc(
            start=start, debug=False, write_tables=False, errorlog=yacc.NullLogger()
        )
        _PARSERS[start] = parser
    return parser.parse(source, lexer=lexer)


def parse(source: str) -> list[SStatement]:
    """Parse a chunk of ``;``-separated statements."""
    return list(_parse(source, "program"))


def parse_term(source: str) -> STerm:
    return cast(STerm, _parse(source, "term"))


def parse_type(source: str) -> SType:
    return cast(SType, _parse(source, "type"))


__all__ = ["parse", "parse_term", "parse_type"]
