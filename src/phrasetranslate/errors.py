class TranslateError(Exception):
    """Base class for every failure raised by phrasetranslate."""


class NotFoundError(TranslateError, FileNotFoundError):
    def __init__(self, filename: str, directory: str) -> None:
        super().__init__(f"File {filename} not found in {directory}")
        self.filename = filename
        self.directory = directory


class FormatError(TranslateError, ValueError):
    def __init__(self, message: str, line: int | None = None) -> None:
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)
        self.line = line


class ArgumentRangeError(TranslateError, IndexError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Argument {index} out of range")
        self.index = index


class KeyNotFoundError(TranslateError, KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Phrase {self.key!r} not found"
