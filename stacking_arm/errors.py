"""Exceptions raised by the stacking_arm package."""


class StackingArmError(Exception):
    """Base class for all stacking_arm errors."""


class InvalidChainShape(StackingArmError, ValueError):
    """Joint and segment length counts do not describe a chain."""


class DegenerateChain(InvalidChainShape):
    """Chain has fewer than two joints."""


class DegenerateDirection(StackingArmError, ArithmeticError):
    """Direction vector has zero length and cannot be normalized."""


class GridIndexError(StackingArmError, IndexError):
    """Grid cell coordinates are outside the grid."""
