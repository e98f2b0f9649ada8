# Core type aliases for Kappa's data model.
# Runtime values are plain Python objects (int, str, bool) plus the Nil/Undef
# sentinels, immutable Pair cells and Closure objects. Forms use Python lists
# for compound expressions and Symbol for variable names.
#
# Naming guidance:
# - SExpression: a form as produced by the reader (code-as-data).
# - LispValue:   an evaluated runtime value.
# - Continuation: the rest of a computation. It takes one LispValue and hands
#   the next TailCall back to the trampoline; it never returns a LispValue.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms alias
SExpression = Any

Continuation = Callable[[LispValue], "TailCall"]

# Evaluator function type, passed into special forms: (expr, env, k) -> TailCall
EvaluatorFn = Callable[[SExpression, "Environment", Continuation], "TailCall"]
