"""Exception types shared by the service and the client."""


class QuizError(Exception):
    """Base class for quiz errors."""


class DataQualityError(QuizError):
    """A question bank entry violates the item invariants."""


class UpstreamUnavailable(QuizError):
    """A remote dependency (API, model, store) failed or timed out."""


class PersistenceError(QuizError):
    """A score could not be written."""


class GenerationParseError(QuizError):
    """A generated reply could not be read as a list of questions."""

    def __init__(self, message: str, raw_text: str = "") -> None:
        super().__init__(message)
        self.raw_text = raw_text


class InvalidTransition(QuizError):
    """A session action was dispatched in a state that does not accept it."""
