class InvalidDimensions(ValueError):
    """Raised when a maze is constructed with a zero (or otherwise unusable) size."""

    def __init__(self, width, height):
        super().__init__(f"Maze dimensions must be positive integers, got {width}x{height}")
        self.width = width
        self.height = height


class InternalInvariantViolation(RuntimeError):
    """
    The generator reached a state its own bookkeeping should make impossible
    (a carve between non-adjacent cells, or backtracking past the start cell).
    """
