from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Callable, List, NoReturn, Optional, Sequence

from langpack.colors import translate_alternate_color_codes
from langpack.constants import ALT_COLOR_CHAR
from langpack.core.models import EntryField
from langpack.language_package import LanguagePackage
from langpack.languages import DEFAULT_LANGUAGE, Language
from langpack.logging.factory import DefaultLoggerFactory
from langpack.logging.helpers import get_logger
from langpack.processing.segmenter import MarkupFormatError, RichTextSegmenter

logger = get_logger('langpack')


class CliError(Exception):
    """Raised by :func:`_fatal` to abort the current run."""


def _configure_logging(enable_json: bool, verbose: bool = False) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    mode = (bool(enable_json), bool(verbose))
    prev = getattr(_configure_logging, '_configured_mode', None)
    if prev is not None and prev == mode:
        return
    level = logging.DEBUG if verbose else logging.INFO
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('langpack')
    setattr(_configure_logging, '_configured_mode', mode)


def _fatal(msg: str) -> NoReturn:
    """Log *msg* and abort the run."""
    logger.error(msg)
    raise CliError(msg)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='langpack',
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            'langpack – expand localized strings from a language package\n'
            'Prints the processed entry for KEY, or the rendered --template.'
        ),
    )
    g_src = p.add_argument_group('Package')
    g_out = p.add_argument_group('Output')
    g_misc = p.add_argument_group('Miscellaneous')

    g_src.add_argument('-d', '--dir', metavar='DIR', dest='directory', required=True,
                       help='Directory holding the <name>_<abbr>.yml files.')
    g_src.add_argument('-n', '--name', metavar='NAME', dest='name', required=True,
                       help='Package name (file-name prefix).')
    g_src.add_argument('--append', metavar='NAME', action='append', dest='append', default=[],
                       help='Append another package of the same directory. Repeatable.')
    g_src.add_argument('-l', '--lang', metavar='ABBR', dest='lang', default=DEFAULT_LANGUAGE.abbreviation,
                       help='Language abbreviation (default: %(default)s).')
    g_src.add_argument('--fallback', metavar='ABBR', dest='fallback',
                       help='Language consulted for keys missing from --lang.')

    g_out.add_argument('-f', '--field', metavar='KEY=VALUE', action='append', dest='fields', default=[],
                       help='Field override passed to the expansion. Repeatable.')
    g_out.add_argument('-t', '--template', metavar='TEXT', dest='template',
                       help='Render TEXT instead of looking up KEY.')
    g_out.add_argument('-s', '--segments', action='store_true', dest='segments',
                       help='Print rich text segments as JSON lines.')

    g_misc.add_argument('--json-logs', action='store_true', dest='json_logs',
                        help='Emit logs as JSON.')
    g_misc.add_argument('-v', '--verbose', action='store_true', dest='verbose',
                        help='Debug logging.')
    p.add_argument('key', metavar='KEY', nargs='?', help='Entry key to process.')
    return p


def _parse_fields(items: Optional[List[str]], *, on_error: Callable[[str], None]) -> List[EntryField]:
    fields: List[EntryField] = []
    for itm in items or []:
        if '=' not in itm:
            on_error(f"--field expects KEY=VALUE (got '{itm}')")
            continue
        key, val = itm.split('=', 1)
        fields.append(EntryField(key, val))
    return fields


def _parse_language(abbr: Optional[str], flag: str) -> Optional[Language]:
    if abbr is None:
        return None
    language = Language.from_abbreviation(abbr)
    if language is None:
        _fatal(f'{flag}: unknown language {abbr!r}')
    return language


class LangPack:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> str:
        """Run the tool with an argv-like sequence and return the output text."""
        ns = _build_parser().parse_args(list(argv))
        _configure_logging(ns.json_logs or os.getenv('LANGPACK_JSON_LOGS') == '1', ns.verbose)

        if not ns.key and ns.template is None:
            _fatal('either KEY or --template is required')

        language = _parse_language(ns.lang, '--lang')
        fallback = _parse_language(ns.fallback, '--fallback')
        fields = _parse_fields(ns.fields, on_error=_fatal)

        package = LanguagePackage(
            ns.directory,
            ns.name,
            fallback_language=fallback,
            logger=get_logger('package'),
        )
        package.load()
        for extra in ns.append:
            package.append_package(extra)

        if ns.template is not None:
            expanded = package.process_string(ns.template, *fields, language=language)
            text = translate_alternate_color_codes(ALT_COLOR_CHAR, expanded)
            if not ns.segments:
                return text + '\n'
            try:
                segments = RichTextSegmenter().segment(text)
            except MarkupFormatError as exc:
                _fatal(f'malformed markup: {exc}')
        elif ns.segments:
            try:
                segments = package.get_texts(ns.key, *fields, language=language)
            except MarkupFormatError as exc:
                _fatal(f'malformed markup in {ns.key!r}: {exc}')
            if segments is None:
                _fatal(f'no entry for key {ns.key!r} ({language.abbreviation})')
        else:
            text = package.get_string(ns.key, *fields, language=language)
            if text is None:
                _fatal(f'no entry for key {ns.key!r} ({language.abbreviation})')
            return text + '\n'

        return ''.join(json.dumps(seg.to_dict(), ensure_ascii=False) + '\n' for seg in segments)


def main() -> NoReturn:
    """Entry point for the `langpack` console script."""
    try:
        sys.stdout.write(LangPack.run(sys.argv[1:]))
        raise SystemExit(0)
    except CliError:
        raise SystemExit(1)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
