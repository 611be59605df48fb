"""Building blocks for a small unit-testing library: predicates, expression
decomposition, float comparison, string views, a stopwatch and result tallies."""

__version__ = "0.1.0"

__all__ = [
    "decompose",
    "errors",
    "floats",
    "predicates",
    "strview",
    "summary",
    "timer",
    "traits",
]