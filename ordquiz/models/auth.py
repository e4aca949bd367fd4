"""Pydantic models for signed-in players."""
from pydantic import BaseModel


class Identity(BaseModel):
    """Profile exposed by the identity provider session."""

    subject: str
    name: str | None = None
    email: str | None = None
    image: str | None = None

    @property
    def user_id(self) -> str:
        return self.email or self.subject

    @property
    def display_name(self) -> str | None:
        return self.name or self.email
