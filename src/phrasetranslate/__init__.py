from phrasetranslate.errors import (
    ArgumentRangeError,
    FormatError,
    KeyNotFoundError,
    NotFoundError,
    TranslateError,
)
from phrasetranslate.translator import Translator

__all__ = [
    "ArgumentRangeError",
    "FormatError",
    "KeyNotFoundError",
    "NotFoundError",
    "TranslateError",
    "Translator",
]
