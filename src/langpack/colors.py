from __future__ import annotations

"""Chat color codes and alternate-code translation.

Language files write colors as ``&a``, ``&l`` … which are translated to the
section-sign form understood by game clients (``§a``). English files are
also seeded with named entries (``{{red}}``, ``{{bold}}`` …) that expand to
those codes.
"""

from enum import Enum
from typing import Dict

COLOR_CHAR = '§'
_ALL_CODES = '0123456789AaBbCcDdEeFfKkLlMmNnOoRrXx'


class ChatColor(Enum):
    BLACK = '0'
    DARK_BLUE = '1'
    DARK_GREEN = '2'
    DARK_AQUA = '3'
    DARK_RED = '4'
    DARK_PURPLE = '5'
    GOLD = '6'
    GRAY = '7'
    DARK_GRAY = '8'
    BLUE = '9'
    GREEN = 'a'
    AQUA = 'b'
    RED = 'c'
    LIGHT_PURPLE = 'd'
    YELLOW = 'e'
    WHITE = 'f'
    MAGIC = 'k'
    BOLD = 'l'
    STRIKETHROUGH = 'm'
    UNDERLINE = 'n'
    ITALIC = 'o'
    RESET = 'r'

    @property
    def code(self) -> str:
        return self.value

    def __str__(self) -> str:
        return COLOR_CHAR + self.value


def translate_alternate_color_codes(alt_char: str, text: str) -> str:
    """Replace *alt_char* + code with the section-sign form.

    Only characters followed by a valid code are translated; the code is
    lower-cased (``&A`` → ``§a``).
    """
    chars = list(text)
    for i in range(len(chars) - 1):
        if chars[i] == alt_char and chars[i + 1] in _ALL_CODES:
            chars[i] = COLOR_CHAR
            chars[i + 1] = chars[i + 1].lower()
    return ''.join(chars)


def default_color_entries() -> Dict[str, str]:
    """Named color/format entries seeded into English language files."""
    return {
        'black': str(ChatColor.BLACK),
        'blue': str(ChatColor.DARK_BLUE),
        'green': str(ChatColor.DARK_GREEN),
        'cyan': str(ChatColor.DARK_AQUA),
        'aqua': str(ChatColor.DARK_AQUA),
        'red': str(ChatColor.DARK_RED),
        'purple': str(ChatColor.DARK_PURPLE),
        'pink': str(ChatColor.LIGHT_PURPLE),
        'gold': str(ChatColor.GOLD),
        'gray': str(ChatColor.DARK_GRAY),
        'light_gray': str(ChatColor.GRAY),
        'light_blue': str(ChatColor.BLUE),
        'light_green': str(ChatColor.GREEN),
        'light_cyan': str(ChatColor.AQUA),
        'light_aqua': str(ChatColor.AQUA),
        'light_red': str(ChatColor.RED),
        'light_purple': str(ChatColor.LIGHT_PURPLE),
        'yellow': str(ChatColor.YELLOW),
        'white': str(ChatColor.WHITE),
        'magic': str(ChatColor.MAGIC),
        'bold': str(ChatColor.BOLD),
        'strike': str(ChatColor.STRIKETHROUGH),
        'underline': str(ChatColor.UNDERLINE),
        'italic': str(ChatColor.ITALIC),
        'reset': str(ChatColor.RESET),
        'color_code': COLOR_CHAR,
    }
