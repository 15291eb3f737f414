import json

from cli import main


def test_outline_command(tmp_path, capsys):
	p = tmp_path / "Foo.cs"
	p.write_text("public class Foo { private int x; }")
	assert main(["outline", str(p)]) == 0
	out = capsys.readouterr().out.splitlines()
	assert out == [
		"Reading source code from:",
		str(p),
		"public Class: Foo",
		"  private Field: x (Type: int)",
	]


def test_outline_missing_file(tmp_path, capsys):
	assert main(["outline", str(tmp_path / "Missing.cs")]) == 1
	out = capsys.readouterr().out
	assert "File doesn't exist, exiting" in out
	assert "Class:" not in out


def test_outline_directory_as_json(tmp_path, capsys):
	(tmp_path / "A.cs").write_text("enum A { One }")
	(tmp_path / "B.cs").write_text("struct B { }")
	assert main(["outline", "--json", str(tmp_path)]) == 0
	results = json.loads(capsys.readouterr().out)
	assert [r["lines"][0] for r in results] == ["internal Enum: A", "internal Struct: B"]


def test_group_members_flag(tmp_path, capsys):
	p = tmp_path / "C.cs"
	p.write_text("class C { void M() { } int f; }")
	assert main(["outline", "--group-members", str(p)]) == 0
	out = capsys.readouterr().out.splitlines()
	assert out[2:] == ["internal Class: C", "  private Field: f (Type: int)", "  private Method: M"]
