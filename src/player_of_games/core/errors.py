"""
Engine error classes.

Two kinds of failure exist:
- InvariantViolation: a broken internal invariant (logic error). Fatal;
  the engine never catches it.
- BudgetExhausted: the search budget ran out before the root was expanded.
  Expected and recoverable: retry with a larger budget or fall back to a
  random move.
"""


class InvariantViolation(RuntimeError):
    """The exploration graph or a score broke an invariant."""


class BudgetExhausted(RuntimeError):
    """No child of the root was discovered within the search budget."""
