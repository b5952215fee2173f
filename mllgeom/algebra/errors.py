"""Errors raised by the algebra package."""


class AlgebraError(Exception):
    """Base class for all algebra errors."""


class ProjectiveAllZeroError(AlgebraError):
    """A projective point was given only zero coordinates."""

    def __init__(self) -> None:
        super().__init__("Projective points cannot have all zero coordinates")


class DivisionByZeroError(AlgebraError, ZeroDivisionError):
    """An element was divided by zero."""

    def __init__(self) -> None:
        super().__init__("Cannot divide by zero")


class DimensionMismatchError(AlgebraError):
    """Two objects of different dimensions were combined."""

    def __init__(self, found: int, expected: int) -> None:
        self.found = found
        self.expected = expected
        super().__init__(f"Expected dimension {expected}, but got {found}")


class WrongDegreeError(AlgebraError):
    """A monomial of the wrong degree was met in a homogeneous polynomial."""

    def __init__(self, found: int, expected: int) -> None:
        self.found = found
        self.expected = expected
        super().__init__(f"Expected degree {expected}, got {found}")