import logging
import pathlib

import vdf

from phrasetranslate import parser
from phrasetranslate.classes import LanguageReport

logger = logging.getLogger(__name__)

BASELINE_LANGUAGE = "en"


def load_languages(language_cfg_path: str) -> dict[str, str]:
    """Read the ``"Languages"`` section of a languages.cfg file into {langid: name}."""
    languages_cfg = vdf.loads(pathlib.Path(language_cfg_path).read_text("utf-8"))
    languages = {}
    for section, entries in languages_cfg.items():
        if section.lower() == "languages":
            languages.update(entries)
    return languages


def check_phrases(text: str, languages: dict[str, str]) -> list[LanguageReport]:
    # English is the baseline every other translation is compared against
    baseline = parser.parse(text, BASELINE_LANGUAGE)

    reports = []
    for langid, name in languages.items():
        categories = parser.parse(text, langid)
        report = LanguageReport(langid, name)
        for key, category in categories.items():
            if not category.phrase:
                report.missing.append(key)
                continue
            english = baseline.get(key)
            if (
                langid != BASELINE_LANGUAGE
                and english is not None
                and english.phrase
                and len(english.slots) != len(category.slots)
            ):
                report.mismatched.append(key)

        if report.has_issues:
            logger.error(
                f"Found {len(report.missing) + len(report.mismatched)} issues for {name} ({langid})"
            )
        else:
            logger.info(f"No issues found for {name} ({langid})")
        reports.append(report)
    return reports
