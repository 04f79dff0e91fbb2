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
Logging configuration for the preamble CLI.

Console logs go to stderr so stdout stays usable in build pipelines. A log
file in the per-user log directory is only written in verbose mode.
"""

from datetime import datetime
from pathlib import Path

from loguru import logger
from rich.console import Console

from preamble.constants import APP_NAME, LOG_DIR


def setup_logger(debug: bool = False, log_dir: Path = LOG_DIR) -> Path | None:
    """
    Set up loguru sinks for one invocation.

    Args:
        debug: Log everything at DEBUG and also write a log file
        log_dir: Where log files live when debug is on

    Returns:
        Path to the log file, or None when no file sink was added (quiet
        mode, or the log directory is not writable)
    """
    # Clear existing sinks to avoid duplicates
    logger.remove()

    console = Console(stderr=True)
    console_level = "DEBUG" if debug else "WARNING"

    def console_sink(message):
        text = message.record["message"].rstrip("\n")
        console.print(text, markup=False, highlight=False)

    logger.add(console_sink, level=console_level, format="{message}", catch=True)

    if not debug:
        return None

    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    logfile = log_dir / f"{APP_NAME}_{timestamp}.log"

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            logfile,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | "
            "{level: <8} | "
            "{name}:{function}:{line} | "
            "{message}",
            rotation="5 MB",
            retention="7 days",
            catch=True,
        )
    except OSError as e:
        # console logging still works, only the file sink is skipped
        logger.warning(f"Could not create log file in {log_dir}: {e}")
        return None

    logger.debug(f"Log File Created At: {logfile}")
    return logfile
