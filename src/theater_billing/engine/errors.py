"""
Errors raised while pricing performances and building statements.

All of them abort the statement being built; callers should treat them as
problems in the upstream invoice or play data.
"""


class StatementError(Exception):
    """Base class for statement computation failures."""


class UnknownPlayID(StatementError):
    """A performance references a play id missing from the play lookup."""

    def __init__(self, play_id: str):
        self.play_id = play_id
        super().__init__(f"unknown playID: {play_id}")


class UnknownPlayType(StatementError):
    """A play's type is not one of the supported play types."""

    def __init__(self, play_type: str):
        self.play_type = play_type
        super().__init__(f"unknown type: {play_type}")


class InvalidAudience(StatementError):
    """Audience is negative or not a whole number of seats."""

    def __init__(self, audience):
        self.audience = audience
        super().__init__(f"invalid audience: {audience!r}")
