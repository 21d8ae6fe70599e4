"""
Exceptions raised by the distance computation.
"""


class InvalidInputError(ValueError):
    """Malformed polynomial or point set. Raised before any computation."""


class DegenerateRootError(ArithmeticError):
    """
    No real critical point survived root filtering for a point.

    Analytically impossible for a squared-distance polynomial, so this signals
    a numerical problem rather than bad input.
    """

    def __init__(self, index, point, message=None):
        self.index = index
        self.point = tuple(point)
        if message is None:
            message = (
                f"no real root of the distance derivative for point {index} "
                f"{self.point}"
            )
        super().__init__(message)
