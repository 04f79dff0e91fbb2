# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

"""
Escape normalization for assembled preamble text.

Users write ``\\n`` and ``\\t`` in their --print/--more strings (or in the
external file) and expect real newlines and tabs in the output. A doubled
backslash protects the sequence, so ``\\\\n`` comes out as the two
characters ``\\n``.

This operates on runtime text, not on any language's string literal syntax.

Protected sequences are parked behind the private use code point U+E000.
Input that already contains U+E000 followed by ``n`` or ``t`` is therefore
rewritten to a literal ``\\n`` or ``\\t``.
"""

import re

# private use code point, never produced by the substitutions below
_SENTINEL = "\ue000"

_DOUBLE_ESCAPED = re.compile(r"\\\\([nt])")
_PROTECTED = re.compile(_SENTINEL + "([nt])")

_SPECIAL_CHARS = {
    "\\n": "\n",
    "\\t": "\t",
}


def normalize_escapes(text: str) -> str:
    """
    Convert literal ``\\n``/``\\t`` into newline/tab, keeping doubled escapes.

    Runs as three ordered passes so a protected sequence is never expanded:
    protect ``\\\\n``/``\\\\t`` behind a sentinel, expand what is left, then
    restore the sentinels as a single backslash plus the letter.
    """
    protected = _DOUBLE_ESCAPED.sub(lambda m: _SENTINEL + m.group(1), text)

    expanded = protected
    for sequence, char in _SPECIAL_CHARS.items():
        expanded = expanded.replace(sequence, char)

    return _PROTECTED.sub(lambda m: "\\" + m.group(1), expanded)
