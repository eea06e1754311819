"""
Exception types raised by pyosmotic.

Shape and argument problems abort a call before any numeric work.
Per-element data problems never raise; they become NaN in the output.
"""

__all__ = [
    'OsmoticError',
    'ArgumentCountError',
    'ShapeMismatchError',
    'EvaluatorError',
]


class OsmoticError(Exception):
    """Base class for all pyosmotic errors."""

    pass


class ArgumentCountError(OsmoticError, TypeError):
    """Raised when a function receives the wrong number of inputs."""

    pass


class ShapeMismatchError(OsmoticError, ValueError):
    """Raised when input arrays cannot be conformed to a common grid."""

    pass


class EvaluatorError(OsmoticError, LookupError):
    """Raised when a thermodynamic evaluator cannot be resolved."""

    pass
