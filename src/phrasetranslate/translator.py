import logging
import pathlib
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from phrasetranslate import parser
from phrasetranslate.classes import Category
from phrasetranslate.errors import FormatError, NotFoundError
from phrasetranslate.interpolation import format_phrase

logger = logging.getLogger(__name__)

PHRASE_FILE_EXTENSION = ".phrases"


class Translator:
    """Holds the categories loaded for one language and formats strings with them.

    Changing the language drops every loaded category; files have to be loaded
    again for the new language.
    """

    def __init__(self, translation_directory: str, language: str = "en") -> None:
        if not language:
            raise ValueError("language must not be empty")
        self._translation_directory = pathlib.Path(translation_directory)
        self._language = language
        self._categories: dict[str, Category] = {}

    @property
    def language(self) -> str:
        return self._language

    @property
    def translation_directory(self) -> pathlib.Path:
        return self._translation_directory

    @property
    def categories(self) -> Mapping[str, Category]:
        return MappingProxyType(self._categories)

    def __contains__(self, key: object) -> bool:
        return key in self._categories

    def __len__(self) -> int:
        return len(self._categories)

    def set_language(self, language: str) -> None:
        """Switch the active language and clear all loaded categories."""
        if not language:
            raise ValueError("language must not be empty")
        logger.debug(f"Switching language {self._language} -> {language}")
        self._language = language
        self._categories.clear()

    def load(self, file_name: str) -> None:
        path = pathlib.Path(file_name)
        if not path.suffix:
            path = path.with_name(path.name + PHRASE_FILE_EXTENSION)

        file = self._translation_directory / path
        if not file.is_file():
            raise NotFoundError(str(path), str(self._translation_directory))

        logger.debug(f"Parsing {file}")
        before = len(self._categories)
        try:
            text = file.read_text("utf-8")
        except UnicodeDecodeError as exc:
            raise FormatError(f"{path} is not valid UTF-8: {exc.reason}") from exc
        parser.parse(text, self._language, self._categories)
        logger.info(
            f"Loaded {len(self._categories) - before} categories from {path} ({self._language})"
        )

    def format(self, template: str, *args: Any) -> str:
        return format_phrase(template, self._categories, args)
