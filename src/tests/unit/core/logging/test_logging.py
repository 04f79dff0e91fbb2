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

import pytest
from loguru import logger

from preamble.core.logging.logging import setup_logger
from preamble.core.logging.utils import time_block


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


def test_quiet_mode_has_no_log_file(tmp_path):
    assert setup_logger(debug=False, log_dir=tmp_path) is None
    assert list(tmp_path.iterdir()) == []


def test_quiet_mode_hides_debug_and_info(tmp_path, capsys):
    setup_logger(debug=False, log_dir=tmp_path)
    logger.debug("debug line")
    logger.info("info line")
    logger.warning("warning line")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "debug line" not in captured.err
    assert "info line" not in captured.err
    assert "warning line" in captured.err


def test_debug_mode_writes_log_file(tmp_path):
    logfile = setup_logger(debug=True, log_dir=tmp_path / "logs")
    logger.debug("written to file")
    logger.remove()

    assert logfile.parent == tmp_path / "logs"
    assert logfile.name.startswith("preamble_")
    assert "written to file" in logfile.read_text()


def test_time_block_logs_timing(tmp_path):
    logfile = setup_logger(debug=True, log_dir=tmp_path)
    with time_block("unit"):
        pass
    logger.remove()

    content = logfile.read_text()
    assert "Starting unit" in content
    assert "Finished unit. Timing(ms)=" in content


def test_unwritable_log_dir_falls_back_to_console(tmp_path, capsys):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")

    assert setup_logger(debug=True, log_dir=blocker / "logs") is None
    logger.debug("still logged")

    err = capsys.readouterr().err
    assert "Could not create log file" in err
    assert "still logged" in err
