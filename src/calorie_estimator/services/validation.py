"""Input checks performed before estimating."""

from calorie_estimator.services.estimator import trim

EMPTY_INPUT_MESSAGE = (
    'Add some foods first (e.g., "2 eggs, toast with butter, black coffee")'
)


class EmptyInputError(ValueError):
    """Raised when there is nothing to estimate."""

    def __init__(self) -> None:
        super().__init__(EMPTY_INPUT_MESSAGE)


def validate_input(raw: str) -> str:
    """Return trimmed input or raise if it is blank."""
    cleaned = trim(raw)
    if not cleaned:
        raise EmptyInputError
    return cleaned
