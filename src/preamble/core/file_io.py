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

from pathlib import Path

from loguru import logger

from preamble.constants import ENCODING
from preamble.core.exceptions import (
    is_a_directory,
    no_such_file,
    read_failed,
    write_failed,
)


def read_text_file(path: Path, file_type: str) -> str:
    """
    Read a whole file as UTF-8 text.

    Invalid byte sequences are replaced rather than rejected. Failures are
    classified into directory, missing file and generic read errors, tagged
    with file_type ("external" or "output") for the user message.
    """
    try:
        data = path.read_bytes()
    except IsADirectoryError as e:
        raise is_a_directory(path, file_type, str(e)) from e
    except FileNotFoundError as e:
        raise no_such_file(path, file_type, str(e)) from e
    except OSError as e:
        # windows reports directories as permission errors
        if path.is_dir():
            raise is_a_directory(path, file_type, str(e)) from e
        raise read_failed(path, file_type, str(e)) from e

    logger.debug(
        "Read {size} bytes from {file_type} file {path}",
        size=len(data),
        file_type=file_type,
        path=path,
    )
    return data.decode(ENCODING, errors="replace")


def write_text_file(path: Path, text: str) -> None:
    """Replace the full contents of path with text, encoded as UTF-8."""
    data = text.encode(ENCODING)
    try:
        path.write_bytes(data)
    except OSError as e:
        raise write_failed(path, str(e)) from e

    logger.debug("Wrote {size} bytes to {path}", size=len(data), path=path)
