import numpy as np


Triangle = list[list[int]]
Path = list[int]
""" Values from the apex down to the base """


class InvalidTriangleError(ValueError):
  pass

class PathResult:
  found: bool
  path: Path # Empty when no path was found

  def __init__(self, found: bool, path: Path = None):
    self.found = found
    self.path = list(path) if found and path else []

  @property
  def sum(self) -> int:
    return sum(self.path)

  def __eq__(self, other) -> bool:
    if not isinstance(other, PathResult):
      return NotImplemented
    return self.found == other.found and self.path == other.path
  def __repr__(self) -> str:
    return f"PathResult(found={self.found}, path={self.path})"


def isOdd(number: int) -> bool:
  # Python's modulo follows the divisor, so -3 % 2 == 1 and -4 % 2 == 0
  return number % 2 == 1

def _verifyTriangle(triangle: Triangle) -> None:
  if triangle is None:
    raise InvalidTriangleError("No triangle was provided")
  if len(triangle) == 0:
    raise InvalidTriangleError("The triangle must have at least one row")

def findMaxSum(triangle: Triangle) -> int:
  """
  Finds the maximum sum of any path from the apex to the base, stepping from (row, col)
  to (row+1, col) or (row+1, col+1). The triangle passed in is left untouched.
  """
  _verifyTriangle(triangle)

  data = [list(row) for row in triangle]    # Scratch copy we fold upward
  for i in range(len(data) - 1, 0, -1):
    row = data[i]
    parentRow = data[i - 1]
    for j in range(i):
      parentRow[j] += max(row[j], row[j + 1])

  return data[0][0]

def findMaxAlternatingPath(triangle: Triangle) -> PathResult:
  """
  Finds the path from the apex to the base with the largest sum in which every pair of
  neighboring values alternates between odd and even.

  The scan runs from the base upward. Each parent picks one of its two children as the
  continuation of its path, and positions that cannot continue any alternating path are
  marked dead so their own parents skip them.

  Candidate selection is greedy per parent: when both children qualify, the larger value
  wins, and the lower column wins a tie. Only one path is kept per position.
  """
  _verifyTriangle(triangle)

  rows = len(triangle)
  dead = np.zeros((rows, rows), dtype=bool)
  paths: list[list[Path | None]] = [[None] * rows for _ in range(rows)]

  # Every base position starts a path consisting of only itself
  for j, value in enumerate(triangle[rows - 1]):
    paths[rows - 1][j] = [value]

  for i in range(rows - 1, 0, -1):
    row = triangle[i]
    parentRow = triangle[i - 1]
    for j in range(i):
      parent = parentRow[j]
      childIndex = _chooseCandidate(row, parent, i, j, dead)
      if childIndex is None:
        dead[i - 1, j] = True
        continue

      # Copy before extending, the child may be the candidate of its other parent too
      parentPath = list(paths[i][childIndex])
      parentPath.append(parent)
      paths[i - 1][j] = parentPath

  path = paths[0][0]
  if path is None:
    return PathResult(False)

  path.reverse() # Built from the base up
  return PathResult(True, path)

def _chooseCandidate(row: list[int], parent: int, i: int, j: int, dead: np.ndarray) -> int | None:
  """Returns the column of the child continuing the parent's path, or None if the parent is dead."""
  child1, child2 = row[j], row[j + 1]
  child1Dead, child2Dead = dead[i, j], dead[i, j + 1]
  isParentOdd = isOdd(parent)

  if child1Dead and child2Dead:
    return None
  elif child1Dead:
    return j + 1 if isOdd(child2) != isParentOdd else None
  elif child2Dead:
    return j if isOdd(child1) != isParentOdd else None

  child1Alternates = isOdd(child1) != isParentOdd
  child2Alternates = isOdd(child2) != isParentOdd
  if child1Alternates and child2Alternates:
    return j + 1 if child2 > child1 else j
  elif child1Alternates:
    return j
  elif child2Alternates:
    return j + 1
  return None
