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

from dataclasses import dataclass
from pathlib import Path

from preamble.core.exceptions import output_option_missing


@dataclass
class GlobalConfig:
    verbose: bool = False
    color: bool = True

    descriptions = {
        "verbose": "Enable verbose logging output (console and log file)",
        "color": "Color error messages with ANSI escape codes",
    }


@dataclass(frozen=True)
class PreambleOptions:
    output: Path
    print_text: str | None = None
    external: Path | None = None
    more: str | None = None

    @classmethod
    def from_cli(
        cls,
        output: str | Path | None,
        print_text: str | None = None,
        external: str | Path | None = None,
        more: str | None = None,
    ):
        # empty strings count as unset; Path("") would silently become "."
        if not output:
            raise output_option_missing()

        return PreambleOptions(
            output=Path(output),
            print_text=print_text,
            external=Path(external) if external else None,
            more=more,
        )
