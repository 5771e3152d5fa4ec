from __future__ import annotations

from langpack.colors import ChatColor, translate_alternate_color_codes
from langpack.core.models import ActionKind, EntryField, TextAction, TextSegment
from langpack.io.language_file import LanguageFile, LanguageFileError
from langpack.language_package import LanguagePackage
from langpack.languages import DEFAULT_LANGUAGE, Language
from langpack.processing.conditions import ConditionEvaluator, evaluate_condition
from langpack.processing.placeholder_resolver import PlaceholderResolver, expand
from langpack.processing.segmenter import MarkupFormatError, RichTextSegmenter, segment
from langpack.processing.string_pool import PoolType, StringPool
from langpack.rendering.template_engine import PlaceholderTemplateEngine

__version__ = '1.0.0'

__all__ = [
    'ActionKind',
    'ChatColor',
    'ConditionEvaluator',
    'DEFAULT_LANGUAGE',
    'EntryField',
    'Language',
    'LanguageFile',
    'LanguageFileError',
    'LanguagePackage',
    'MarkupFormatError',
    'PlaceholderResolver',
    'PlaceholderTemplateEngine',
    'PoolType',
    'RichTextSegmenter',
    'StringPool',
    'TextAction',
    'TextSegment',
    'evaluate_condition',
    'expand',
    'segment',
    'translate_alternate_color_codes',
]
