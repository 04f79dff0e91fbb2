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

from enum import Enum
from pathlib import Path

from loguru import logger

from preamble.context import PreambleOptions
from preamble.core.assembler import assemble_preamble
from preamble.core.escapes import normalize_escapes
from preamble.core.exceptions import (
    FileReadError,
    FileWriteError,
    output_not_found,
)
from preamble.core.file_io import read_text_file, write_text_file
from preamble.core.logging.utils import time_block


class PrependState(Enum):
    CHECK_EXISTS = "check_exists"
    READ_OUTPUT = "read_output"
    WRITE_OUTPUT = "write_output"
    DONE = "done"
    FATAL_MISSING_OUTPUT = "fatal_missing_output"
    FATAL_READ_ERROR = "fatal_read_error"
    FATAL_WRITE_ERROR = "fatal_write_error"


class FilePrepender:
    """
    Rewrites an existing output file as ``normalize(preamble) + original``.

    Runs CHECK_EXISTS -> READ_OUTPUT -> WRITE_OUTPUT -> DONE. Any failure moves
    to the matching FATAL_* state and the error is raised to the caller; the
    output file is only touched in WRITE_OUTPUT.
    """

    def __init__(self, output: Path):
        self.output = output
        self.state = PrependState.CHECK_EXISTS

    def _transition(self, state: PrependState) -> None:
        logger.debug(
            "Prepender {old} -> {new}", old=self.state.name, new=state.name
        )
        self.state = state

    def prepend(self, preamble: str) -> str:
        """Prepend preamble to the output file and return the new contents."""
        if self.state is not PrependState.CHECK_EXISTS:
            raise RuntimeError(f"FilePrepender already ran (state={self.state.name})")

        if not self.output.exists():
            self._transition(PrependState.FATAL_MISSING_OUTPUT)
            raise output_not_found(self.output)
        self._transition(PrependState.READ_OUTPUT)

        try:
            original = read_text_file(self.output, "output")
        except FileReadError:
            self._transition(PrependState.FATAL_READ_ERROR)
            raise
        self._transition(PrependState.WRITE_OUTPUT)

        contents = normalize_escapes(preamble) + original
        try:
            write_text_file(self.output, contents)
        except FileWriteError:
            self._transition(PrependState.FATAL_WRITE_ERROR)
            raise
        self._transition(PrependState.DONE)

        return contents


def run_preamble(options: PreambleOptions) -> str:
    """Assemble the preamble from options and prepend it to the output file."""
    with time_block("Preamble"):
        preamble = assemble_preamble(options)
        contents = FilePrepender(options.output).prepend(preamble)

    logger.info(
        "Prepended preamble to {path} (now {count} characters)",
        count=len(contents),
        path=options.output,
    )
    return contents
