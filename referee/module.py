"""Symbol tables of a specification: types, properties, configuration."""

from __future__ import annotations

from .syntax import (
    Expr,
    Spec,
    Type,
    TypeBoolean,
    TypeInteger,
    TypeNumber,
    TypeString,
)


class Module:
    """Holds the declarations, expressions and patterns of one source."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._types: dict[str, Type] = {
            "boolean": TypeBoolean(),
            "integer": TypeInteger(),
            "string": TypeString(),
            "number": TypeNumber(),
        }
        self._props: dict[str, Type] = {"__time__": TypeInteger()}
        self._confs: dict[str, Type] = {}
        self._exprs: list[Expr] = []
        self._specs: list[Spec] = []
        self._context: list[str] = []
        self._type_names: list[str] = []
        self._prop_names: list[str] = []
        self._conf_names: list[str] = []

    @property
    def type_names(self) -> list[str]:
        """Names of user-declared types, in declaration order."""
        return list(self._type_names)

    @property
    def prop_names(self) -> list[str]:
        """Names of declared properties, in declaration order."""
        return list(self._prop_names)

    @property
    def conf_names(self) -> list[str]:
        """Names of declared configuration values, in declaration order."""
        return list(self._conf_names)

    @property
    def exprs(self) -> list[Expr]:
        """Expressions added so far."""
        return list(self._exprs)

    @property
    def specs(self) -> list[Spec]:
        """Patterns added so far."""
        return list(self._specs)

    @staticmethod
    def _declare(table: dict[str, Type], names: list[str], kind: str,
                 name: str, type_: Type) -> None:
        if name in table:
            raise ValueError(f"{kind} {name!r} is already declared")
        table[name] = type_
        names.append(name)

    @staticmethod
    def _lookup(table: dict[str, Type], kind: str, name: str) -> Type:
        try:
            return table[name]
        except KeyError:
            raise KeyError(f"unknown {kind} {name!r}") from None

    def add_type(self, name: str, type_: Type) -> None:
        """Declare a named type."""
        self._declare(self._types, self._type_names, "type", name, type_)

    def add_prop(self, name: str, type_: Type) -> None:
        """Declare a property."""
        self._declare(self._props, self._prop_names, "property", name, type_)

    def add_conf(self, name: str, type_: Type) -> None:
        """Declare a configuration value."""
        self._declare(self._confs, self._conf_names, "configuration", name, type_)

    def get_type(self, name: str) -> Type:
        """Return the type named ``name``."""
        return self._lookup(self._types, "type", name)

    def get_prop(self, name: str) -> Type:
        """Return the type of the property ``name``."""
        return self._lookup(self._props, "property", name)

    def get_conf(self, name: str) -> Type:
        """Return the type of the configuration value ``name``."""
        return self._lookup(self._confs, "configuration", name)

    def has_type(self, name: str) -> bool:
        return name in self._types

    def has_data(self, name: str) -> bool:
        return name in self._props

    def has_conf(self, name: str) -> bool:
        return name in self._confs

    def push_context(self, name: str) -> None:
        """Enter a named state context."""
        self._context.append(name)

    def pop_context(self) -> None:
        """Leave the innermost state context."""
        if not self._context:
            raise IndexError("no context to pop")
        self._context.pop()

    def has_context(self, name: str) -> bool:
        return name in self._context

    def add_expr(self, expr: Expr) -> None:
        self._exprs.append(expr)

    def add_spec(self, spec: Spec) -> None:
        self._specs.append(spec)