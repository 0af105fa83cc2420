"""Domain errors."""


class InvalidInputError(ValueError):
    """Malformed or out-of-range engine input."""

    def __init__(self, message: str = "Invalid input"):
        self.message = message
        super().__init__(self.message)
