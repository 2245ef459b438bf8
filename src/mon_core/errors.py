"""mON error taxonomy.

Every failure is terminal for the parse call that raised it.
"""
from __future__ import annotations


class MonError(Exception):
    """Base error for the format."""

    code = "E_MON"
    label = "Error"

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(self.describe())

    def describe(self) -> str:
        """Human readable rendering of the error."""
        if self.detail is None:
            return f"Error: {self.label}"
        return f"Error: {self.label}: {self.detail}"

    def print(self) -> None:
        print(self.describe())


class Incomplete(MonError):
    """A field promised more data than the buffer holds."""

    code = "E_INCOMPLETE"
    label = "Incomplete data"


class NoStructure(MonError):
    """The buffer ended while a delimiter was still expected."""

    code = "E_NO_STRUCTURE"
    label = "No structure"

    def __init__(self):
        super().__init__("The data does not follow the mON structure.")


class BadStructure(MonError):
    """A field's text is malformed."""

    code = "E_BAD_STRUCTURE"
    label = "Bad data"


class NoContent(MonError):
    """Content scan requested for a zero length record."""

    code = "E_NO_CONTENT"

    def __init__(self):
        super().__init__()

    def describe(self) -> str:
        return "Error: Content of length 0 cannot be parsed."
