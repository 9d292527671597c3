# referee

The core data model of a compiler for a temporal-logic specification
language. It has the syntax tree, the type model and a symbol table for a
compilation unit. It also has a pass that rewrites temporal formulas into
canonical form.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `referee.position`

`Location(row, col)` is a point in the source text. `Position(beg, end)`
is a span between two locations.

- `str(Location(3, 4))` gives `"3:4"`.
- `str(Position(...))` gives `"3:4 .. 3:9"`.

### `referee.utils`

These functions parse literal tokens:

- `parse_integer(text, base)` parses a signed 64-bit integer. It accepts
  leading whitespace and a sign. It raises `ValueError` on trailing
  characters, and on values at or beyond the 64-bit limits.
- `parse_binint`, `parse_octint`, `parse_decint` and `parse_hexint` call
  `parse_integer` with base 2, 8, 10 and 16.
- `parse_number(text)` parses a decimal or hexadecimal floating-point
  number. It raises `ValueError` on bad input and on positive overflow.
- `parse_string(text)` strips the surrounding quote characters.
- `parse_boolean(text)` accepts `"true"` and `"false"`. Anything else
  raises `ValueError`.
- `hex_dump(data)` renders bytes or a string as a hex dump. Each line
  holds 16 bytes, followed by a column of printable characters.

### `referee.strings`

`Strings.instance()` returns a process-wide string pool.
`get_string(data)` returns one shared object for equal strings, and
accepts `str` or `bytes`.

### `referee.syntax`

The nodes are dataclasses that compare by structure. Source positions
(`where`) and calculated types (`type`) take no part in comparison.

- **Types.**
  - Primitives: `TypeVoid`, `TypeBoolean`, `TypeInteger`, `TypeNumber`
    and `TypeString`.
  - `TypeArray(type, size)`: an array; a size of 0 means a dynamic array.
  - Composites: `TypeStruct`, `TypeEnum` and `TypeContext`. Each has
    `member(name)` and `index(name)`. Enum items are indexed from 1, and
    `index` raises `KeyError` for unknown names.
- **Expressions.**
  - Constants: `ExprConstInteger`, `ExprConstNumber`, `ExprConstString`
    and `ExprConstBoolean`.
  - Arithmetic, comparison and logic operators: `ExprAdd`, `ExprEq`,
    `ExprAnd`, `ExprImp`, `ExprChoice` and the rest.
  - Future-time operators: `ExprG`, `ExprF`, `ExprUs`, `ExprUw`,
    `ExprRs`, `ExprRw`, `ExprXs` and `ExprXw`.
  - Past-time operators: `ExprH`, `ExprO`, `ExprSs`, `ExprSw`, `ExprTs`,
    `ExprTw`, `ExprYs`, `ExprYw` and `ExprInt`.
  - Timed operators take an optional `time=` keyword. Its value is a
    `Time`, `TimeMin` or `TimeMax` interval.
  - `is_temporal()` reports whether an expression contains a timed
    temporal operator.
  - References and access: `ExprAt`, `ExprContext`, `ExprData`,
    `ExprConf`, `ExprMmbr` and `ExprIndx`.
- **Specification patterns.**
  - `SpecUniversality`, `SpecAbsence`, `SpecExistence`,
    `SpecTransientState` and `SpecSteadyState`.
  - `SpecMinimunDuration`, `SpecMaximumDuration` and `SpecRecurrence`.
  - `SpecPrecedence`, `SpecPrecedenceChain12` and
    `SpecPrecedenceChain21`.
  - `SpecResponse`, `SpecResponseChain12`, `SpecResponseChain21`,
    `SpecResponseInvariance` and `SpecUntil`.
  - Scopes: `SpecGlobally`, `SpecBefore`, `SpecAfter`, `SpecBetweenAnd`,
    `SpecAfterUntil` and `SpecWhile`. `SpecWhile(arg, spec)` is a
    between-and scope from `arg` to `not arg`.
- **Errors.** `PositionedError(position, info)` is an exception whose
  message names the span it refers to.

### `referee.module`

`Module(name)` is the symbol table of one compilation unit.

- **Built-in entries.** It starts with the types `boolean`, `integer`,
  `string` and `number`, and with the property `__time__`.
- **Declarations.** `add_type`, `add_prop` and `add_conf` declare
  entries. Declaring a name twice raises `ValueError`.
- **Lookups.** `get_type`, `get_prop` and `get_conf` raise `KeyError` for
  unknown names. `has_type`, `has_data` and `has_conf` test whether a
  name is declared.
- **Context names.** `push_context`, `pop_context` and `has_context`
  manage the stack of context names.
- **Collected items.** `add_expr` and `add_spec` collect expressions and
  patterns. Read them back with the `exprs` and `specs` properties.
- **Declaration order.** The `type_names`, `prop_names` and `conf_names`
  properties list the declared names in the order they were declared.

### `referee.canonic`

`canonic(expr)` rewrites a formula as follows:

- Parentheses are removed.
- Implication becomes disjunction.
- `G`, `F`, `H` and `O` become `Rw`, `Us`, `Tw` and `Ss` with a constant
  left operand.

`negated(expr)` pushes a negation inward through the duals of the
logical, comparison and temporal operators. Where no dual applies, it
wraps the expression in `ExprNot`.

## Example

```python
from referee.syntax import ExprConstBoolean, ExprG, ExprNot, ExprRw
from referee.canonic import canonic

t = ExprConstBoolean(True)
f = ExprConstBoolean(False)

# G p  becomes  false Rw p
assert canonic(ExprG(t)) == ExprRw(f, t)
assert canonic(ExprNot(t)) == f
```

## What this package does not do

- It has no parser for specification text. Syntax trees are built by
  constructing the node classes directly.
- It does not calculate types, generate code or evaluate formulas
  against recorded data.
- It provides no command-line tool.