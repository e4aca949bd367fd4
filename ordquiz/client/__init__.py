"""Quiz client: HTTP access, session state machine and terminal front end."""
from ordquiz.client.api_client import QuizApiClient
from ordquiz.client.session import QuizSession, SessionResult, SessionStatus

__all__ = ["QuizApiClient", "QuizSession", "SessionResult", "SessionStatus"]
