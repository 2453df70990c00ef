"""
Domain errors
"""


class InvalidInputError(ValueError):
    """Input that cannot be scored, e.g. a zero budget used as a divisor."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")
