import logging
import re

from phrasetranslate.classes import Category, FormatSlot
from phrasetranslate.errors import FormatError

logger = logging.getLogger(__name__)

phrase_file_regex = re.compile(r'\s*"phrases"\s*\{(.*)\}\s*', re.IGNORECASE | re.DOTALL)
category_name_regex = re.compile(r'"(.+)"')
phrase_info_regex = re.compile(r'"([^"\s]+)"\s+"(.*)"')
param_regex = re.compile(r"\{(([0-9]{0,2})(?::([A-Za-z0-9 ._-]+))?)\}")

INVALID_FORMAT = "invalid phrase file format"


def _lines(body: str, first_line: int):
    for number, line in enumerate(body.splitlines(), start=first_line):
        line = line.strip()
        if line:
            yield number, line


def parse_slots(phrase: str, line: int | None = None) -> list[FormatSlot | None]:
    """Collect the placeholders of a phrase, indexed by their written position.

    Every match in the phrase is considered, so a repeated index keeps the format
    of its last occurrence and missing indices stay ``None``.
    """
    found: list[FormatSlot] = []
    for match in param_regex.finditer(phrase):
        digits = match.group(2)
        if not digits:
            raise FormatError(INVALID_FORMAT, line)
        found.append(FormatSlot(int(digits), match.group(3) or ""))

    if not found:
        return []

    slots: list[FormatSlot | None] = [None] * (max(slot.index for slot in found) + 1)
    for slot in found:
        slots[slot.index] = slot
    return slots


def parse(
    text: str, language: str, categories: dict[str, Category] | None = None
) -> dict[str, Category]:
    """Parse a phrase file, keeping only the phrases written for ``language``.

    Completed category blocks are inserted into ``categories`` as soon as their
    closing brace is read. A name that is already present keeps its first
    definition. When a later block is malformed, the blocks before it have
    already been merged.
    """
    if categories is None:
        categories = {}

    if not text.strip():
        return categories

    file_match = phrase_file_regex.fullmatch(text)
    if file_match is None:
        raise FormatError(INVALID_FORMAT)

    lines = _lines(file_match.group(1), text.count("\n", 0, file_match.start(1)) + 1)
    for number, line in lines:
        name_match = category_name_regex.search(line)
        if name_match is None:
            raise FormatError(INVALID_FORMAT, number)
        category_name = name_match.group(1)

        number, line = next(lines, (number, ""))
        if not line.startswith("{"):
            raise FormatError(INVALID_FORMAT, number)

        category = Category()
        closed = False
        for number, line in lines:
            if line.startswith("}"):
                closed = True
                break

            info_match = phrase_info_regex.search(line)
            if info_match is None:
                raise FormatError(INVALID_FORMAT, number)

            langid, phrase = info_match.groups()
            if langid == language:
                category.phrase = phrase
                category.slots = parse_slots(phrase, number)

        if not closed:
            raise FormatError(f'{INVALID_FORMAT}: category "{category_name}" is not closed')

        if category_name in categories:
            logger.debug(f'Skipping duplicate category "{category_name}"')
            continue
        categories[category_name] = category
        logger.debug(f'Parsed category "{category_name}"')

    return categories
