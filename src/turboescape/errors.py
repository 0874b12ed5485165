"""Exceptions raised by turboescape."""


class EscapeError(ValueError):
    """Base class for all turboescape errors."""


class InvalidSinkError(EscapeError):
    """The output sink is missing or cannot be written to."""


class DuplicateEntityError(EscapeError):
    """An entity name was registered twice in the same table."""

    def __init__(self, name, table=None):
        self.name = name
        self.table = table
        where = f" in table {table!r}" if table else ""
        super().__init__(f"Duplicate entity name {name!r}{where}")


class MalformedEscapeError(EscapeError):
    """A \\u escape with missing or non-hex digits, with location information."""

    def __init__(self, code, position=None, fragment=None):
        self.code = code
        self.position = position
        self.fragment = fragment
        super().__init__(str(self))

    def __repr__(self):
        if self.position is not None:
            return f"MalformedEscapeError({self.code!r}, position={self.position})"
        return f"MalformedEscapeError({self.code!r})"

    def __str__(self):
        message = self.code
        if self.fragment is not None:
            message = f"{self.code} - unable to parse unicode value {self.fragment!r}"
        if self.position is not None:
            return f"({self.position}): {message}"
        return message
