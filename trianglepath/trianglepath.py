import os
import sys

import colorama

from trianglepath import constant
from trianglepath.constant import DEFAULT_INPUT_FILE, MIN_ROWS, VALID_FLAGS, VALID_MODES
from trianglepath.formatting import ERROR_STYLE, HEADER_STYLE, formatPath, formatSum, formatTriangle, styleText
from trianglepath.triangle import InvalidTriangleError, Triangle, findMaxAlternatingPath, findMaxSum
from trianglepath.triangle_files import TriangleFormatError, parseInlineTriangle, readTriangleFromFile


def solvePath(triangle: Triangle, draw = False, useColor = True) -> None:
  result = findMaxAlternatingPath(triangle)
  if not result.found:
    print("Sorry... Triangle path not exists.")
    return

  print(styleText(HEADER_STYLE, "Maximum path and sum in triangle: ", useColor))
  print(formatPath(result.path))
  print(formatSum(result.path))
  if draw:
    print()
    print(formatTriangle(triangle, result.path, useColor))
def solveSum(triangle: Triangle, draw = False, useColor = True) -> None:
  print(styleText(HEADER_STYLE, "Maximum sum in triangle: ", useColor) + str(findMaxSum(triangle)))
  if draw:
    print()
    print(formatTriangle(triangle, useColor=useColor))

def loadTriangle(mode: str, args: list[str]) -> Triangle | None:
  """Reads the triangle named by the arguments, or returns None after explaining what's missing."""
  if mode == "t":
    if not args:
      print("Cannot solve an inline triangle without the triangle as well, e.g. \"1;8 9;1 5 9\"")
      return None
    return parseInlineTriangle(" ".join(args))

  fileName = args[0] if args else DEFAULT_INPUT_FILE
  if not os.path.isfile(fileName):
    print(f"File '{fileName}' not exists or inaccessible.")
    return None
  return readTriangleFromFile(fileName)

def main(argv: list[str] = None) -> int:
  """
  Call signatures:
    trianglepath p? FILE?             solve the alternating odd/even path
    trianglepath s FILE?              the unconstrained maximum sum
    trianglepath t "1;8 9;1 5 9"      solve a triangle typed inline

  FLAGS can appear anywhere in the list:
    draw                              also print the triangle with the path highlighted
    plain                             no colors
  """
  args = list(sys.argv[1:] if argv is None else argv)

  flags = set()
  for flag in VALID_FLAGS:
    while flag in args:
      flags.add(flag)
      args.remove(flag)
  useColor = constant.USE_COLOR and "plain" not in flags
  if useColor:
    colorama.just_fix_windows_console()

  mode = "p"
  if args and args[0] in VALID_MODES:
    mode = args.pop(0)

  try:
    triangle = loadTriangle(mode, args)
    if triangle is None:
      return 1
    if len(triangle) < MIN_ROWS:
      print(f"Input data is invalid. The triangle can be at least from {MIN_ROWS} rows.")
      return 1

    if mode == "s":
      solveSum(triangle, draw="draw" in flags, useColor=useColor)
    else:
      solvePath(triangle, draw="draw" in flags, useColor=useColor)
  except (TriangleFormatError, InvalidTriangleError, OSError) as err:
    print(styleText(ERROR_STYLE, f"Error: {err}", useColor))
    return 1

  return 0

if __name__ == "__main__":
  sys.exit(main())
