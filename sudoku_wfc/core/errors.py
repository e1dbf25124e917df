"""Exceptions raised by the board and the collapse engine."""


class CollapseError(Exception):
    """Base class for failures while collapsing a cell."""

    def __init__(self, x: int, y: int, message: str):
        super().__init__(f"{message} at ({x}, {y})")
        self.x = x
        self.y = y


class EmptyDomainError(CollapseError):
    """
    The chosen cell has no candidates left.

    This is an expected contradiction: the board it was raised on is a
    dead end and should be abandoned.
    """

    def __init__(self, x: int, y: int):
        super().__init__(x, y, "Cannot collapse cell with no candidates")


class AlreadyFixedError(CollapseError):
    """Collapse was requested on a cell that already holds a fixed value."""

    def __init__(self, x: int, y: int):
        super().__init__(x, y, "Cannot collapse cell with a fixed value")
