from trianglepath.constant import INLINE_ROW_SEPARATOR, SEPARATORS
from trianglepath.triangle import Triangle


class TriangleFormatError(ValueError):
  line: str
  lineNumber: int
  source: str

  def __init__(self, message: str, line: str, lineNumber: int, source: str):
    super().__init__(message)
    self.line = line
    self.lineNumber = lineNumber
    self.source = source


# Read triangle methods
def readTriangleFromFile(fileName: str, separators: str = SEPARATORS) -> Triangle:
  try:
    with open(fileName, "r", encoding="utf-8") as triangleFile:
      contents = triangleFile.read()
  except UnicodeDecodeError as err:
    lineNumber = err.object[:err.start].count(b"\n") + 1 # Line in the file, blank lines included
    raise TriangleFormatError(f"Failed to read line {lineNumber} as UTF-8 text ({err.reason}). Source: '{fileName}'.",
                              "", lineNumber, fileName) from err
  return parseTriangle(contents, separators=separators, source=fileName)
def parseInlineTriangle(text: str, separators: str = SEPARATORS) -> Triangle:
  """Parses the compact one-line form, e.g. "1;8 9;1 5 9;4 5 2 3"."""
  return parseTriangle(text.replace(INLINE_ROW_SEPARATOR, "\n"), separators=separators)
def parseTriangle(text: str, separators: str = SEPARATORS, source: str = "<string>") -> Triangle:
  triangle: Triangle = []
  for line in text.splitlines():
    if not line.strip():
      continue # Skip empty lines

    rowNumber = len(triangle) + 1
    tokens = _splitLine(line, separators)
    try:
      values = [int(token) for token in tokens]
    except ValueError as err:
      raise TriangleFormatError(f"Failed to parse line '{line}' to integer numbers. Source: '{source}'.",
                                line, rowNumber, source) from err

    if len(values) != rowNumber:
      raise TriangleFormatError("Input data is not valid. Each line of the triangle must have the same number of items as the row number. " +
                                f"Invalid line number: {rowNumber}. Source: '{source}'.",
                                line, rowNumber, source)
    triangle.append(values)

  return triangle
def _splitLine(line: str, separators: str) -> list[str]:
  if not separators:
    return line.split()

  # Fold every separator into the first so runs of them collapse
  for separator in separators[1:]:
    line = line.replace(separator, separators[0])
  return [token for token in line.split(separators[0]) if token]

# Save triangle methods
def generateFileContents(triangle: Triangle, separator: str = " ") -> str:
  return "\n".join(separator.join(map(str, row)) for row in triangle)
def saveTriangle(triangle: Triangle, fileName: str) -> None:
  with open(fileName, "w", encoding="utf-8") as triangleFile:
    print(generateFileContents(triangle), file = triangleFile)
