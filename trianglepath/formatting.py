from colorama import Back, Fore, Style

from trianglepath import constant
from trianglepath.triangle import Path, Triangle, isOdd


ODD_STYLE = Back.BLUE + Fore.WHITE
EVEN_STYLE = Back.YELLOW + Fore.BLACK
HEADER_STYLE = Style.BRIGHT
ERROR_STYLE = Fore.RED


def formatNumber(number: int) -> str:
  return f"({number})" if number < 0 else str(number)
def formatPath(path: Path) -> str:
  return constant.PATH_JOINER.join(map(str, path))
def formatSum(path: Path) -> str:
  return f"{sum(path)} = " + " + ".join(map(formatNumber, path))

def styleText(style: str, text: str, useColor: bool = None) -> str:
  """Wraps the text in the style and resets afterwards. Returns the text unchanged when color is off."""
  if useColor is None:
    useColor = constant.USE_COLOR
  if not useColor or not style:
    return text
  return style + text + Style.RESET_ALL
def formatParity(number: int, text: str = None, useColor: bool = None) -> str:
  style = ODD_STYLE if isOdd(number) else EVEN_STYLE
  return styleText(style, text if text is not None else str(number), useColor)

def traceColumns(triangle: Triangle, path: Path) -> list[int]:
  """
  Recovers the column used in each row by walking the path downward from the apex.
  Equal neighbors can both match, so dead ends are backtracked out of. If the path
  does not fit the triangle, the longest matching prefix is returned.
  """
  if not path or not triangle or triangle[0][0] != path[0]:
    return []

  depth = min(len(triangle), len(path))
  longest: list[int] = []

  def walk(columns: list[int]) -> bool:
    nonlocal longest
    if len(columns) > len(longest):
      longest = list(columns)
    if len(columns) == depth:
      return True

    i = len(columns)
    col = columns[-1]
    for nextCol in (col, col + 1):
      if triangle[i][nextCol] == path[i]:
        columns.append(nextCol)
        if walk(columns):
          return True
        columns.pop()
    return False

  walk([0])
  return longest
def formatTriangle(triangle: Triangle, path: Path = None, useColor: bool = None) -> str:
  if not triangle:
    return ""

  width = max(len(str(value)) for row in triangle for value in row)
  columns = traceColumns(triangle, path) if path else []
  lines = []

  for i, row in enumerate(triangle):
    indent = " " * ((len(triangle) - 1 - i) * (width + 1) // 2)
    cells = []
    for j, value in enumerate(row):
      text = str(value).rjust(width)
      if i < len(columns) and columns[i] == j:
        text = formatParity(value, text, useColor)
      cells.append(text)
    lines.append(indent + " ".join(cells))

  return "\n".join(lines)
