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
from unittest.mock import patch

import pytest

from preamble.core.exceptions import (
    DirectoryReadError,
    FileReadError,
    FileWriteError,
    MissingFileError,
)
from preamble.core.file_io import read_text_file, write_text_file


def test_read_text_file(tmp_path):
    target = tmp_path / "LICENSE.txt"
    target.write_bytes("MIT © 2017".encode("utf-8"))

    assert read_text_file(target, "external") == "MIT © 2017"


def test_read_keeps_bytes_verbatim(tmp_path):
    target = tmp_path / "crlf.txt"
    target.write_bytes(b"line1\r\nline2\\n")

    assert read_text_file(target, "external") == "line1\r\nline2\\n"


def test_read_replaces_invalid_utf8(tmp_path):
    target = tmp_path / "bad.bin"
    target.write_bytes(b"ok\xff")

    assert read_text_file(target, "output") == "ok\ufffd"


def test_read_directory_raises_directory_error(tmp_path):
    with pytest.raises(DirectoryReadError) as exc_info:
        read_text_file(tmp_path, "external")

    assert exc_info.value.message == f"Expecting a file and not a directory:\n{tmp_path}"
    assert exc_info.value.file_type == "external"


def test_read_missing_file_raises_missing_file_error(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(MissingFileError) as exc_info:
        read_text_file(missing, "external")

    assert exc_info.value.message == f"No such file exists:\n{missing}"


def test_read_other_failure_is_generic(tmp_path):
    target = tmp_path / "locked.txt"
    target.write_text("secret")

    with patch.object(Path, "read_bytes", side_effect=PermissionError("denied")):
        with pytest.raises(FileReadError) as exc_info:
            read_text_file(target, "output")

    assert type(exc_info.value) is FileReadError
    assert exc_info.value.message == (
        f"There was an error reading your output file:\n{target}"
    )
    assert exc_info.value.details == "denied"


def test_write_text_file_replaces_content(tmp_path):
    target = tmp_path / "out.js"
    target.write_text("old content that is longer")

    write_text_file(target, "new")

    assert target.read_bytes() == b"new"


def test_write_encodes_utf8(tmp_path):
    target = tmp_path / "out.js"
    target.write_text("")

    write_text_file(target, "/* © */\n")

    assert target.read_bytes() == "/* © */\n".encode("utf-8")


def test_write_failure_raises_write_error(tmp_path):
    target = tmp_path / "out.js"

    with patch.object(Path, "write_bytes", side_effect=OSError("disk full")):
        with pytest.raises(FileWriteError) as exc_info:
            write_text_file(target, "data")

    assert exc_info.value.message == f"There was an error writing your file:\n{target}"
    assert exc_info.value.path == target
