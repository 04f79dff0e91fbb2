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

from platformdirs import user_log_path

APP_NAME = "preamble"
LOG_DIR = Path(user_log_path(appname=APP_NAME))

# both the external and output files are decoded and encoded with this
ENCODING = "utf-8"

HELP_HINT = f"Use '{APP_NAME} -h' for more details."

USAGE_EXAMPLES = [
    f"{APP_NAME} -p \"/*Released under the MIT License*/\\n\" -o ./dist/script.min.js",
    f"{APP_NAME} -e ./prepend.txt -o ./dist/script.min.js",
    f"{APP_NAME} -p \"/*\" -e ./LICENSE.md -m \"*/\" -o ./dist/script.min.js",
]
