"""Abstract syntax of specifications: types, expressions and patterns.

Nodes compare structurally: two nodes are equal when they are of the same
class and their children are equal. Source positions and calculated types
take no part in comparison.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import ClassVar, Generic, Protocol, Sequence, TypeVar

from .position import Position

_node = dataclass(unsafe_hash=True)

T = TypeVar("T")


class PositionedError(Exception):
    """An error tied to a span of the source text."""

    def __init__(self, position: Position, info: str) -> None:
        self.position = position
        self.info = info
        super().__init__(f"{info} at [{position}]")


@_node
class Node:
    """Base of every syntax node; carries its source position."""

    where: Position = field(
        default_factory=Position, compare=False, repr=False, kw_only=True
    )


# ---------------------------------------------------------------- types


class Type(Node):
    """Base of all types."""


class TypePrimitive(Type):
    """Base of the scalar types."""


class TypeComposite(Type, abc.ABC):
    """A type whose values have named members."""

    @abc.abstractmethod
    def member(self, name: str) -> Type | None:
        """Return the type of the member ``name``."""

    @abc.abstractmethod
    def index(self, name: str) -> int:
        """Return the ordinal of the member ``name``."""


class TypeVoid(TypePrimitive):
    """The type of no value."""


class TypeBoolean(TypePrimitive):
    """Boolean values."""


class TypeInteger(TypePrimitive):
    """Signed 64-bit integers."""


class TypeNumber(TypePrimitive):
    """Floating point numbers."""


class TypeString(TypePrimitive):
    """Strings."""


@dataclass(frozen=True)
class Named(Generic[T]):
    """A value paired with its name."""

    name: str
    data: T


class _Scope(Protocol):
    conf_names: Sequence[str]
    prop_names: Sequence[str]

    def has_conf(self, name: str) -> bool: ...

    def get_conf(self, name: str) -> Type: ...

    def get_prop(self, name: str) -> Type: ...


@dataclass(eq=False)
class TypeContext(TypeComposite):
    """The type of a state: its members are the module's props and confs."""

    module: _Scope

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.module is other.module  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((TypeContext, id(self.module)))

    def member(self, name: str) -> Type | None:
        if self.module.has_conf(name):
            return self.module.get_conf(name)
        return self.module.get_prop(name)

    def index(self, name: str) -> int:
        names = (
            self.module.conf_names
            if self.module.has_conf(name)
            else self.module.prop_names
        )
        try:
            return list(names).index(name)
        except ValueError:
            raise KeyError(f"no member {name!r} in context") from None


@_node
class TypeStruct(TypeComposite):
    """A record of named, typed members."""

    members: tuple[Named[Type], ...]
    _types: dict[str, Type] = field(init=False, repr=False, compare=False)
    _indices: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.members = tuple(self.members)
        self._types = {}
        self._indices = {}
        for member in self.members:
            self._types[member.name] = member.data
            self._indices[member.name] = len(self._indices)

    def member(self, name: str) -> Type | None:
        return self._types.get(name)

    def index(self, name: str) -> int:
        try:
            return self._indices[name]
        except KeyError:
            raise KeyError(f"no member {name!r} in struct") from None


@_node
class TypeArray(Type):
    """An array of ``type``; a size of 0 means the array is dynamic."""

    type: Type
    size: int


@_node
class TypeEnum(TypeComposite):
    """An enumeration; each item is a boolean member, indexed from 1."""

    items: tuple[str, ...]
    _indices: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.items = tuple(self.items)
        self._indices = {}
        for item in self.items:
            self._indices[item] = len(self._indices)

    def member(self, name: str) -> Type | None:
        return TypeBoolean() if name in self.items else None

    def index(self, name: str) -> int:
        try:
            return self._indices[name] + 1
        except KeyError:
            raise KeyError(f"no item {name!r} in enum") from None


# ---------------------------------------------------------- expressions


@_node
class Expr(Node):
    """Base of all expressions; ``type`` is filled in by type calculation."""

    type: Type | None = field(default=None, compare=False, repr=False, kw_only=True)

    def is_temporal(self) -> bool:
        """Whether the expression contains a timed temporal operator."""
        return False


@_node
class Time(Expr):
    """A time interval; either bound may be absent."""

    lo: Expr | None
    hi: Expr | None


class TimeMin(Time):
    """An interval with a lower bound only."""

    def __init__(self, lo: Expr | None, **kwargs: object) -> None:
        super().__init__(lo, None, **kwargs)  # type: ignore[arg-type]


class TimeMax(Time):
    """An interval with an upper bound only."""

    def __init__(self, hi: Expr | None, **kwargs: object) -> None:
        super().__init__(None, hi, **kwargs)  # type: ignore[arg-type]


class ExprNullary(Expr):
    """An expression without sub-expressions."""


@_node
class ExprUnary(Expr):
    """An operator with one operand."""

    op: ClassVar[str] = ""
    arg: Expr

    def is_temporal(self) -> bool:
        return self.arg.is_temporal()


@_node
class ExprBinary(Expr):
    """An operator with two operands."""

    op: ClassVar[str] = ""
    lhs: Expr
    rhs: Expr

    def is_temporal(self) -> bool:
        return self.lhs.is_temporal() or self.rhs.is_temporal()


@_node
class ExprTernary(Expr):
    """An operator with three operands."""

    op: ClassVar[str] = ""
    lhs: Expr
    mhs: Expr
    rhs: Expr

    def is_temporal(self) -> bool:
        return (
            self.lhs.is_temporal() or self.mhs.is_temporal() or self.rhs.is_temporal()
        )


@_node
class _TemporalUnary(ExprUnary):
    time: Time | None = None

    def is_temporal(self) -> bool:
        return True


@_node
class _TemporalBinary(ExprBinary):
    time: Time | None = None

    def is_temporal(self) -> bool:
        return True


@_node
class ExprConstInteger(ExprNullary):
    """An integer literal."""

    value: int


@_node
class ExprConstNumber(ExprNullary):
    """A floating point literal."""

    value: float


@_node
class ExprConstString(ExprNullary):
    """A string literal."""

    value: str


@_node
class ExprConstBoolean(ExprNullary):
    """A boolean literal."""

    value: bool


class ExprParen(ExprUnary):
    op = "()"


class ExprNeg(ExprUnary):
    op = "-"


class ExprAdd(ExprBinary):
    op = "+"


class ExprSub(ExprBinary):
    op = "-"


class ExprMul(ExprBinary):
    op = "*"


class ExprDiv(ExprBinary):
    op = "/"


class ExprMod(ExprBinary):
    op = "%"


class ExprEq(ExprBinary):
    op = "=="


class ExprNe(ExprBinary):
    op = "!="


class ExprGt(ExprBinary):
    op = ">"


class ExprGe(ExprBinary):
    op = ">="


class ExprLt(ExprBinary):
    op = "<"


class ExprLe(ExprBinary):
    op = "<="


class ExprNot(ExprUnary):
    op = "!"


class ExprOr(ExprBinary):
    op = "||"


class ExprAnd(ExprBinary):
    op = "&&"


class ExprXor(ExprBinary):
    op = "^"


class ExprImp(ExprBinary):
    op = "=>"


class ExprEqu(ExprBinary):
    op = "<=>"


class ExprChoice(ExprTernary):
    op = "?:"


class ExprXs(ExprBinary):
    op = "Xs"


class ExprXw(ExprBinary):
    op = "Xw"


class ExprG(_TemporalUnary):
    op = "G"


class ExprF(_TemporalUnary):
    op = "F"


class ExprUs(_TemporalBinary):
    op = "Us"


class ExprUw(_TemporalBinary):
    op = "Uw"


class ExprRs(_TemporalBinary):
    op = "Rs"


class ExprRw(_TemporalBinary):
    op = "Rw"


class ExprYs(ExprBinary):
    op = "Ys"


class ExprYw(ExprBinary):
    op = "Yw"


class ExprH(_TemporalUnary):
    op = "H"


class ExprO(_TemporalUnary):
    op = "O"


class ExprSs(_TemporalBinary):
    op = "Ss"


class ExprSw(_TemporalBinary):
    op = "Sw"


class ExprTs(_TemporalBinary):
    op = "Ts"


class ExprTw(_TemporalBinary):
    op = "Tw"


class ExprInt(_TemporalBinary):
    op = "I"


@dataclass(unsafe_hash=True, init=False)
class ExprAt(ExprUnary):
    """Evaluates ``arg`` in the state named ``name``."""

    op = "@"
    name: str = ""

    def __init__(self, name: str, arg: Expr, **kwargs: object) -> None:
        super().__init__(arg, **kwargs)  # type: ignore[arg-type]
        self.name = name


@_node
class ExprContext(ExprNullary):
    """A reference to a named state."""

    name: str


@_node
class ExprConf(ExprNullary):
    """A configuration value read through a context."""

    ctxt: ExprContext
    name: str


@_node
class ExprData(ExprNullary):
    """A property value read through a context."""

    ctxt: ExprContext
    name: str


@_node
class ExprMmbr(ExprUnary):
    """Access to the member ``mmbr`` of ``arg``."""

    op = "."
    mmbr: str


class ExprIndx(ExprBinary):
    op = "[]"


# ------------------------------------------------------------- patterns


class Spec(Node):
    """Base of specification patterns."""


class SpecScoped(Spec):
    """A pattern restricted to a scope; subclasses carry the inner ``spec``."""


@_node
class _SpecTimed(Spec):
    p: Expr
    t_p: Time | None


class SpecUniversality(_SpecTimed):
    pass


class SpecAbsence(_SpecTimed):
    pass


class SpecExistence(_SpecTimed):
    pass


class SpecTransientState(_SpecTimed):
    pass


class SpecMinimunDuration(_SpecTimed):
    pass


class SpecMaximumDuration(_SpecTimed):
    pass


class SpecRecurrence(_SpecTimed):
    pass


@_node
class SpecSteadyState(Spec):
    p: Expr


@_node
class _SpecPair(Spec):
    p: Expr
    s: Expr
    t_ps: Time | None


class SpecPrecedence(_SpecPair):
    pass


class SpecResponseInvariance(_SpecPair):
    pass


class SpecUntil(_SpecPair):
    pass


@_node
class SpecPrecedenceChain12(Spec):
    s: Expr
    t: Expr
    p: Expr
    t_st: Time | None
    t_ps: Time | None


@_node
class SpecPrecedenceChain21(Spec):
    p: Expr
    s: Expr
    t: Expr
    t_st: Time | None
    t_ps: Time | None


@_node
class SpecResponse(Spec):
    p: Expr
    s: Expr
    t_ps: Time | None
    c_ps: Expr | None


@_node
class SpecResponseChain12(Spec):
    p: Expr
    s: Expr
    t: Expr
    t_ps: Time | None
    t_st: Time | None
    c_ps: Expr | None
    c_st: Expr | None


@_node
class SpecResponseChain21(Spec):
    s: Expr
    t: Expr
    p: Expr
    t_st: Time | None
    t_tp: Time | None
    c_st: Expr | None
    c_tp: Expr | None


@_node
class SpecGlobally(SpecScoped):
    spec: Spec


@_node
class SpecBefore(SpecScoped):
    arg: Expr
    spec: Spec


@_node
class SpecAfter(SpecScoped):
    arg: Expr
    spec: Spec


@_node
class SpecBetweenAnd(SpecScoped):
    lhs: Expr
    rhs: Expr
    spec: Spec


@_node
class SpecAfterUntil(SpecScoped):
    lhs: Expr
    rhs: Expr
    spec: Spec


class SpecWhile(SpecBetweenAnd):
    """Scope between ``arg`` becoming true and becoming false."""

    def __init__(self, arg: Expr, spec: Spec, **kwargs: object) -> None:
        super().__init__(arg, ExprNot(arg), spec, **kwargs)  # type: ignore[arg-type]