from __future__ import annotations


class SceneError(Exception):
    pass


class ParseError(SceneError):
    def __init__(self, message: str, line_number: int = None):
        super().__init__(message)
        self.line_number = line_number

    def at_line(self, line_number: int) -> 'ParseError':
        if self.line_number is None:
            self.line_number = line_number
        return self


class InvalidInputError(ParseError):
    pass


class InvalidLineError(InvalidInputError):
    pass


class PropertyNameTooLongError(ParseError):
    pass


class DuplicateIdentifierError(ParseError):
    def __init__(self, identifier: int, line_number: int = None):
        super().__init__(f"duplicate ID \"{identifier}\"", line_number)
        self.identifier = identifier


class RenderError(SceneError):
    pass


class NullReferenceError(RenderError):
    pass


class InvalidCommandError(RenderError):
    pass


class UnrecognizedError(SceneError):
    pass
