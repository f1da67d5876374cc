import re
from collections.abc import Mapping, Sequence
from typing import Any

from phrasetranslate.classes import Category
from phrasetranslate.errors import ArgumentRangeError, FormatError, KeyNotFoundError
from phrasetranslate.parser import param_regex

ESCAPE_CHAR = "%"
TRANSLATE_DIRECTIVES = "tT"
ARGUMENT_DIRECTIVES = "sSnN"


def _argument(args: Sequence[Any], argc: int) -> Any:
    if argc >= len(args):
        raise ArgumentRangeError(argc)
    return args[argc]


def _lookup(categories: Mapping[str, Category], key: str) -> Category:
    try:
        return categories[key]
    except KeyError:
        raise KeyNotFoundError(key) from None


def _resolve(
    key: str,
    categories: Mapping[str, Category],
    args: Sequence[Any],
    argc: int,
    active: frozenset[str],
) -> tuple[str, int]:
    if key in active:
        raise FormatError(f'Circular reference to phrase "{key}"')
    category = _lookup(categories, key)
    return _expand(category, categories, args, argc, active | {key})


def _expand(
    category: Category,
    categories: Mapping[str, Category],
    args: Sequence[Any],
    argc: int,
    active: frozenset[str],
) -> tuple[str, int]:
    """Resolve the slots of ``category`` and return the text with the next argument index.

    Values are computed in slot order and then written into the phrase in a
    single substitution, so inserted text is never scanned for placeholders.
    """
    values: dict[int, str] = {}
    for slot in category.slots:
        if slot is None:
            continue

        if not slot.raw:
            value = str(_argument(args, argc))
            argc += 1
        elif len(slot.raw) == 1:
            if slot.raw not in TRANSLATE_DIRECTIVES:
                raise FormatError(f"Invalid format '{slot.raw}'")
            key = str(_argument(args, argc))
            value, argc = _resolve(key, categories, args, argc + 1, active)
        else:
            value, argc = _resolve(slot.raw, categories, args, argc, active)
        values[slot.index] = value

    def substitute(match: re.Match) -> str:
        if not match.group(2):
            return match.group(0)
        index = int(match.group(2))
        if index not in values or category.slots[index].selector != match.group(0):
            return match.group(0)
        return values[index]

    return param_regex.sub(substitute, category.phrase), argc


def format_phrase(
    template: str, categories: Mapping[str, Category], args: Sequence[Any]
) -> str:
    """Resolve every ``%`` directive of ``template`` from left to right.

    ``%t`` looks the next argument up as a category and expands its slots,
    ``%s`` and ``%n`` insert the next argument, ``%%`` is a literal percent
    sign. Arguments are shared with nested slots in a single running order.
    """
    result: list[str] = []
    argc = 0
    start = 0
    index = template.find(ESCAPE_CHAR)
    while index != -1:
        result.append(template[start:index])
        if index + 1 >= len(template):
            raise FormatError("Dangling escape character at end of format")
        directive = template[index + 1]
        start = index + 2

        if directive == ESCAPE_CHAR:
            result.append(ESCAPE_CHAR)
        else:
            arg = _argument(args, argc)
            argc += 1
            if directive in TRANSLATE_DIRECTIVES:
                phrase, argc = _resolve(str(arg), categories, args, argc, frozenset())
                result.append(phrase)
            elif directive in ARGUMENT_DIRECTIVES:
                result.append(str(arg))
            else:
                raise FormatError(f"Invalid format '{directive}'")

        index = template.find(ESCAPE_CHAR, start)

    result.append(template[start:])
    return "".join(result)
