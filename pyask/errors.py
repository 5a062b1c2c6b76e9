class AskError(IOError):
    """Raised when the answer cannot be read, or echo cannot be changed."""


class ValidationError(AskError):
    """Raised when the answer is rejected by the validator."""

    def __init__(self, answer):
        super().__init__(f"Response failed validation: {answer!r}")
        self.answer = answer
