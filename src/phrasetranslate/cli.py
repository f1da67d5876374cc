import logging
import os
import sys
from typing import Any

import yaml

import click
from phrasetranslate import report
from phrasetranslate.errors import TranslateError
from phrasetranslate.translator import Translator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    },
    "translator": {
        "translation_folder": "translations",
        "language": "en",
    },
}


def load_config(config_folder: str) -> dict[str, Any]:
    config_file_path = os.path.abspath(f"{config_folder}/config.yml")

    config: dict[str, Any] = {}
    try:
        with open(config_file_path, "r") as file:
            config = yaml.safe_load(file) or {}
    except FileNotFoundError:
        logger.error(f"File {config_file_path} not found, using defaults.")
    except yaml.YAMLError as exc:
        logger.error(sys._getframe().f_code.co_name + " " + str(exc))
        sys.exit(1)

    merged = {}
    for section, defaults in DEFAULT_CONFIG.items():
        merged[section] = {**defaults, **(config.get(section) or {})}

    logging.basicConfig(
        level=logging.getLevelName(merged["logging"]["level"]),
        format=merged["logging"]["format"],
        datefmt=merged["logging"]["datefmt"],
    )
    return merged


@click.group()
@click.version_option()
def cli() -> None:
    pass


@cli.command("format")
@click.option("--config-folder", default="config", help="Configuration folder path.")
@click.option("--translation-folder", help="Phrase files folder path.")
@click.option("--language", help="Language code to load phrases for.")
@click.option(
    "--file", "files", multiple=True, required=True, help="Phrase file to load."
)
@click.argument("template")
@click.argument("args", nargs=-1)
def format_command(
    config_folder: str,
    translation_folder: str | None,
    language: str | None,
    files: tuple[str, ...],
    template: str,
    args: tuple[str, ...],
) -> None:
    config = load_config(config_folder)["translator"]

    translator = Translator(
        os.path.abspath(translation_folder or config["translation_folder"]),
        language or config["language"],
    )
    try:
        for file in files:
            translator.load(file)
        click.echo(translator.format(template, *args))
    except TranslateError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command("check")
@click.option("--config-folder", default="config", help="Configuration folder path.")
@click.option(
    "--translation-folder", required=True, help="Phrase files folder path."
)
@click.argument("file")
def check(config_folder: str, translation_folder: str, file: str) -> None:
    load_config(config_folder)

    language_cfg_path = os.path.abspath(f"{config_folder}/languages.cfg")
    phrase_file_path = os.path.join(os.path.abspath(translation_folder), file)

    logger.info("Parsing languages.cfg...")
    try:
        languages = report.load_languages(language_cfg_path)
    except FileNotFoundError as exc:
        raise click.ClickException(f"File {language_cfg_path} not found") from exc
    logger.info(f"Available languages: {len(languages)}")

    try:
        with open(phrase_file_path, "r", encoding="utf-8") as phrase_file:
            reports = report.check_phrases(phrase_file.read(), languages)
    except FileNotFoundError as exc:
        raise click.ClickException(f"File {file} not found") from exc
    except UnicodeDecodeError as exc:
        raise click.ClickException(f"File {file} is not valid UTF-8") from exc
    except TranslateError as exc:
        raise click.ClickException(f"Error parsing {file}: {exc}") from exc

    issues = False
    for language_report in reports:
        if not language_report.has_issues:
            continue
        issues = True
        click.echo(f"{language_report.name} ({language_report.langid}):")
        for key in language_report.missing:
            click.echo(f'  "{key}" -> Phrase available, but translation missing')
        for key in language_report.mismatched:
            click.echo(f'  "{key}" -> Format parameters differ from English')

    if issues:
        sys.exit(1)
    click.echo("No issues found")
