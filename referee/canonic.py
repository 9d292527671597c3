"""Rewriting of expressions into canonical form."""

from __future__ import annotations

from typing import Callable

from .syntax import (
    Expr,
    ExprAnd,
    ExprAt,
    ExprConstBoolean,
    ExprEq,
    ExprEqu,
    ExprF,
    ExprG,
    ExprGe,
    ExprGt,
    ExprH,
    ExprImp,
    ExprLe,
    ExprLt,
    ExprNe,
    ExprNot,
    ExprO,
    ExprOr,
    ExprParen,
    ExprRs,
    ExprRw,
    ExprSs,
    ExprSw,
    ExprTs,
    ExprTw,
    ExprUs,
    ExprUw,
    ExprXor,
    ExprXs,
    ExprXw,
    ExprYs,
    ExprYw,
)


def _true() -> Expr:
    return ExprConstBoolean(True)


def _false() -> Expr:
    return ExprConstBoolean(False)


def _binary(e: Expr) -> Expr:
    return type(e)(canonic(e.lhs), canonic(e.rhs))  # type: ignore[attr-defined]


def _timed_binary(e: Expr) -> Expr:
    return type(e)(  # type: ignore[call-arg]
        canonic(e.lhs), canonic(e.rhs), time=e.time  # type: ignore[attr-defined]
    )


_CANONIC: dict[type, Callable[[Expr], Expr]] = {
    ExprConstBoolean: lambda e: e,
    ExprParen: lambda e: canonic(e.arg),
    ExprAt: lambda e: ExprAt(e.name, canonic(e.arg)),
    ExprNot: lambda e: negated(e.arg),
    ExprOr: _binary,
    ExprAnd: _binary,
    ExprXor: _binary,
    ExprImp: lambda e: ExprOr(canonic(negated(e.lhs)), canonic(e.rhs)),
    ExprEqu: _binary,
    ExprG: lambda e: ExprRw(_false(), canonic(e.arg), time=e.time),
    ExprF: lambda e: ExprUs(_true(), canonic(e.arg), time=e.time),
    ExprXs: _binary,
    ExprXw: _binary,
    ExprUs: _timed_binary,
    ExprUw: _timed_binary,
    ExprRs: _timed_binary,
    ExprRw: _timed_binary,
    ExprH: lambda e: ExprTw(_false(), canonic(e.arg), time=e.time),
    ExprO: lambda e: ExprSs(_true(), canonic(e.arg), time=e.time),
    ExprYs: _binary,
    ExprYw: _binary,
    ExprSs: _timed_binary,
    ExprSw: _timed_binary,
    ExprTs: _timed_binary,
    ExprTw: _timed_binary,
}


def canonic(expr: Expr) -> Expr:
    """Return ``expr`` rewritten to the core temporal operators.

    Parentheses are dropped, implication becomes disjunction, and the
    derived operators G, F, H and O become releases, untils, triggers and
    sinces. Expressions without a rule are returned unchanged.
    """
    rule = _CANONIC.get(type(expr))
    return expr if rule is None else rule(expr)


_BINARY_DUALS: dict[type, type] = {
    ExprEq: ExprNe,
    ExprNe: ExprEq,
    ExprLt: ExprGe,
    ExprGe: ExprLt,
    ExprGt: ExprLe,
    ExprLe: ExprGt,
}

_LOGIC_DUALS: dict[type, type] = {
    ExprAnd: ExprOr,
    ExprOr: ExprAnd,
    ExprXor: ExprEqu,
    ExprEqu: ExprXor,
    ExprUs: ExprRw,
    ExprRw: ExprUs,
    ExprUw: ExprRs,
    ExprRs: ExprUw,
    ExprSs: ExprTw,
    ExprTw: ExprSs,
    ExprSw: ExprTs,
    ExprTs: ExprSw,
}

_STEP_DUALS: dict[type, type] = {
    ExprXs: ExprXw,
    ExprXw: ExprXs,
    ExprYs: ExprYw,
    ExprYw: ExprYs,
}

_UNARY_DUALS: dict[type, type] = {
    ExprG: ExprF,
    ExprF: ExprG,
    ExprH: ExprO,
    ExprO: ExprH,
}


def negated(expr: Expr) -> Expr:
    """Return an expression equivalent to the negation of ``expr``.

    The negation is pushed inwards through the logical and temporal
    operators using their duals; where no dual applies the expression is
    wrapped in a negation.
    """
    kind = type(expr)
    if kind is ExprConstBoolean:
        return ExprConstBoolean(not expr.value)  # type: ignore[attr-defined]
    if kind is ExprNot:
        return expr.arg  # type: ignore[attr-defined]
    if kind is ExprParen:
        return negated(expr.arg)  # type: ignore[attr-defined]
    if kind is ExprAt:
        return ExprAt(expr.name, negated(expr.arg))  # type: ignore[attr-defined]
    if kind is ExprImp:
        return ExprAnd(expr.lhs, negated(expr.rhs))  # type: ignore[attr-defined]
    if kind in _BINARY_DUALS:
        return _BINARY_DUALS[kind](expr.lhs, expr.rhs)  # type: ignore[attr-defined]
    if kind in (ExprXor, ExprEqu):
        return _LOGIC_DUALS[kind](expr.lhs, expr.rhs)  # type: ignore[attr-defined]
    if kind in (ExprAnd, ExprOr):
        return _LOGIC_DUALS[kind](
            negated(expr.lhs), negated(expr.rhs)  # type: ignore[attr-defined]
        )
    if kind in _LOGIC_DUALS:
        return _LOGIC_DUALS[kind](
            negated(expr.lhs),  # type: ignore[attr-defined]
            negated(expr.rhs),  # type: ignore[attr-defined]
            time=expr.time,  # type: ignore[attr-defined]
        )
    if kind in _STEP_DUALS:
        return _STEP_DUALS[kind](expr.lhs, negated(expr.rhs))  # type: ignore[attr-defined]
    if kind in _UNARY_DUALS:
        return _UNARY_DUALS[kind](
            negated(expr.arg), time=expr.time  # type: ignore[attr-defined]
        )
    return ExprNot(expr)