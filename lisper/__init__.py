# Core type aliases for Lisper's data model.
# Plain Python values stand in for most variants: bool, int/float, str, and list
# (the empty list doubles as EmptyList). Symbol, Pair, Nil and Closure are the
# only dedicated classes, see lisper.types.
#
# Naming guidance:
# - SExpression: Use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable, since code and data
# share one representation.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (used interchangeably with LispValue)
SExpression = LispValue

# Evaluator function type, passed down into special forms and the applier
EvaluatorFn = Callable[..., LispValue]

# A host-implemented procedure over an already-evaluated argument list
Primitive = Callable[[list], LispValue]
