"""Domain errors."""


class TrainNumberError(ValueError):
    """Raised when a train number entered by the passenger is not usable."""

    hint = "Invalid train number."

    def __init__(self, raw_value: str) -> None:
        super().__init__(self.hint)
        self.raw_value = raw_value


class EmptyInputError(TrainNumberError):
    """Nothing (or only whitespace) was entered."""

    hint = "Please enter a train number."


class InvalidFormatError(TrainNumberError):
    """Input is not a 4-5 digit number."""

    hint = "Train number must be 4–5 digits."


class QrRenderingError(RuntimeError):
    """Raised when the QR collaborator fails to produce an image."""
