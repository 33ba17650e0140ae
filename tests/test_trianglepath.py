from trianglepath.trianglepath import main


def writeTriangle(tmp_path, text: str) -> str:
  fileName = tmp_path / "input.txt"
  fileName.write_text(text, encoding="utf-8")
  return str(fileName)


def test_main_solvesFile(tmp_path, capsys):
  fileName = writeTriangle(tmp_path, "1\n8 9\n1 5 9\n4 5 2 3\n")
  assert main([fileName, "plain"]) == 0
  out = capsys.readouterr().out.splitlines()
  assert out == [
    "Maximum path and sum in triangle: ",
    "1->8->5->2",
    "16 = 1 + 8 + 5 + 2",
  ]

def test_main_notFound(tmp_path, capsys):
  fileName = writeTriangle(tmp_path, "-5\n-3 -1\n4 2 6\n1 1 3 1\n")
  assert main(["plain", fileName]) == 0
  assert capsys.readouterr().out.strip() == "Sorry... Triangle path not exists."

def test_main_inlineTriangle(capsys):
  assert main(["t", "8;-3 4;4 2 6;1 1 3 1", "plain"]) == 0
  out = capsys.readouterr().out
  assert "8->-3->4->1" in out
  assert "10 = 8 + (-3) + 4 + 1" in out

def test_main_inlineTriangleMissing(capsys):
  assert main(["t", "plain"]) == 1
  assert "inline triangle" in capsys.readouterr().out

def test_main_sumModeFromFile(tmp_path, capsys):
  fileName = writeTriangle(tmp_path, "1\n8 9\n1 5 9\n4 5 2 3\n")
  assert main(["s", fileName, "plain"]) == 0
  assert capsys.readouterr().out.strip() == "Maximum sum in triangle: 22"

def test_main_draw(tmp_path, capsys):
  fileName = writeTriangle(tmp_path, "1\n8 9\n1 5 9\n")
  assert main([fileName, "draw", "plain"]) == 0
  out = capsys.readouterr().out.splitlines()
  assert out[-3:] == ["  1", " 8 9", "1 5 9"]

def test_main_colorOutput(tmp_path, capsys):
  fileName = writeTriangle(tmp_path, "1\n8 9\n")
  assert main([fileName]) == 0
  out = capsys.readouterr().out
  assert "1->8" in out
  assert "\x1b[" in out

def test_main_missingFile(tmp_path, capsys):
  fileName = str(tmp_path / "missing.txt")
  assert main([fileName, "plain"]) == 1
  assert capsys.readouterr().out.strip() == f"File '{fileName}' not exists or inaccessible."

def test_main_tooFewRows(tmp_path, capsys):
  fileName = writeTriangle(tmp_path, "7\n")
  assert main([fileName, "plain"]) == 1
  assert capsys.readouterr().out.strip() == "Input data is invalid. The triangle can be at least from 2 rows."

def test_main_emptyFile(tmp_path, capsys):
  fileName = writeTriangle(tmp_path, "\n\n")
  assert main([fileName, "plain"]) == 1
  assert "Input data is invalid" in capsys.readouterr().out

def test_main_badFormat(tmp_path, capsys):
  fileName = writeTriangle(tmp_path, "1\n2 3 4\n")
  assert main([fileName, "plain"]) == 1
  out = capsys.readouterr().out
  assert out.startswith("Error: Input data is not valid.")
  assert "Invalid line number: 2" in out

def test_main_badToken(capsys):
  assert main(["t", "1;2 z", "plain"]) == 1
  assert "Error: Failed to parse line '2 z'" in capsys.readouterr().out

def test_main_bundledInput(capsys):
  assert main(["plain"]) == 0
  out = capsys.readouterr().out
  assert "215->192->269->836->805->728->433->528->863->632->931->778->413->310->253" in out
  assert out.splitlines()[2].startswith("8186 = 215 + 192")

def test_main_notUtf8(tmp_path, capsys):
  fileName = tmp_path / "binary.txt"
  fileName.write_bytes(b"1\n\xff\xfe 2\n")
  assert main([str(fileName), "plain"]) == 1
  assert capsys.readouterr().out.startswith("Error: Failed to read line 2 as UTF-8 text")
