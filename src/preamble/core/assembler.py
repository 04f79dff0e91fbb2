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

from loguru import logger

from preamble.context import PreambleOptions
from preamble.core.file_io import read_text_file


def assemble_preamble(options: PreambleOptions) -> str:
    """
    Build the raw preamble: print text, then external file contents, then more text.

    Missing pieces count as empty strings. Escapes are not touched here.
    """
    external_contents = ""
    if options.external is not None:
        external_contents = read_text_file(options.external, "external")

    buffer = (options.print_text or "") + external_contents + (options.more or "")

    logger.debug(
        "Assembled preamble: print={p} external={e} more={m} total={total}",
        p=len(options.print_text or ""),
        e=len(external_contents),
        m=len(options.more or ""),
        total=len(buffer),
    )
    return buffer
