import os

DEFAULT_INPUT_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "Data", "input.txt")

SEPARATORS = " \t"
INLINE_ROW_SEPARATOR = ";"
PATH_JOINER = "->"

MIN_ROWS = 2 # The core handles a single row, but the CLI refuses it
USE_COLOR = True

VALID_MODES = {"p", "s", "t"} # path, sum, inline triangle
VALID_FLAGS = {"draw", "plain"}
