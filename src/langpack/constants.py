from __future__ import annotations

"""Project-wide constants used across modules."""

# Line separator used when lists are flattened into a single entry and when
# processed strings are split back into lines.
NEW_LINE: str = '\n'

# Alternate color-code prefix used in language files.
ALT_COLOR_CHAR: str = '&'

# Files of a language package are named "<package>_<abbreviation>.yml".
PACKAGE_FILE_SUFFIX: str = '.yml'
