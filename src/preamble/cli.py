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

import typer
from colorama import init
from loguru import logger

from preamble.constants import APP_NAME, USAGE_EXAMPLES
from preamble.context import GlobalConfig, PreambleOptions
from preamble.core.exceptions import handle_preamble_exception
from preamble.core.logging.logging import setup_logger
from preamble.core.prepender import run_preamble
from preamble.core.ui.theme import set_theme
from preamble.runtimeutil import (
    ensure_utf8_output,
    get_log_dir_callback,
    version_callback,
)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

app = typer.Typer(
    help="Prepend text and/or file data to an output file.",
    context_settings=CONTEXT_SETTINGS,
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    add_completion=False,
)


@app.command(
    context_settings=CONTEXT_SETTINGS,
    epilog="Examples:\n\n" + "\n\n".join(USAGE_EXAMPLES),
)
def main(
    print_text: str | None = typer.Option(
        None,
        "--print",
        "-p",
        metavar="STRING",
        help="Text to prepend to your output file. "
        "This content is added BEFORE the text from the --external and --more options. "
        f"Example: '{APP_NAME} --print=<string>' or '{APP_NAME} -p <string>'",
    ),
    external: str | None = typer.Option(
        None,
        "--external",
        "-e",
        metavar="FILE-PATH",
        help="A file that has text to be used as prepend data for your output file. "
        "This content is added IN-BETWEEN the text from the --print and --more options. "
        f"Example: '{APP_NAME} --external=<file-path>' or '{APP_NAME} -e <file-path>'",
    ),
    more: str | None = typer.Option(
        None,
        "--more",
        "-m",
        metavar="STRING",
        help="Additional text to prepend to your output file. "
        "This content is added AFTER the text from the --print and --external options. "
        f"Example: '{APP_NAME} --more=<string>' or '{APP_NAME} -m <string>'",
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        metavar="FILE-PATH",
        help="The file to prepend your text to. The output is encoded as UTF-8. "
        f"Example: '{APP_NAME} --output=<file-path>' or '{APP_NAME} -o <file-path>'",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help=GlobalConfig.descriptions["verbose"],
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Print error messages without colors.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_path: bool = typer.Option(
        False,
        "--log-dir",
        callback=get_log_dir_callback,
        is_eager=True,
        help=f"Show log path (where logs for {APP_NAME} live) and exit",
    ),
) -> None:
    """
    Prepend text (--print, --external, --more, in that order) to an existing output file.

    Literal \\n and \\t in the prepended text become a newline and a tab;
    write \\\\n or \\\\t to keep them as-is.
    """
    config = GlobalConfig(verbose=verbose, color=not no_color)
    set_theme("classic" if config.color else "mono")
    setup_logger(debug=config.verbose)

    with handle_preamble_exception(exit_on_fail=True):
        options = PreambleOptions.from_cli(
            output, print_text=print_text, external=external, more=more
        )
        logger.debug("Running with {options}", options=options)
        run_preamble(options)


def run_app():
    """Run the application with global exception handling."""
    # force stdout to be utf8
    ensure_utf8_output()
    # colored output in terminal, stripped when piped
    init()
    # launch cli
    app(prog_name=APP_NAME)


if __name__ == "__main__":
    run_app()
