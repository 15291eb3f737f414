from fastapi.testclient import TestClient

from api import app


client = TestClient(app)


def test_outline_source():
	r = client.post("/outline", json={"source": "public class Foo { public string Name { get; set; } }"})
	assert r.status_code == 200
	body = r.json()
	assert body["lines"] == ["public Class: Foo", "  public Property: Name (Type: string)"]
	decl = body["declarations"][0]
	assert decl["kind"] == "Class"
	assert decl["members"][0]["access"] == "public"


def test_outline_grouped_order():
	source = "class C { void M() { } int f; }"
	r = client.post("/outline", json={"source": source, "member_order": "grouped"})
	assert r.status_code == 200
	assert r.json()["lines"] == [
		"internal Class: C",
		"  private Field: f (Type: int)",
		"  private Method: M",
	]


def test_outline_file(tmp_path):
	p = tmp_path / "Notify.cs"
	p.write_text("public delegate void Notify(string message);")
	r = client.post("/outline/file", json={"path": str(p)})
	assert r.status_code == 200
	body = r.json()
	assert body["path"] == str(p)
	assert body["declarations"][0]["return_type"] == "void"


def test_outline_missing_file(tmp_path):
	r = client.post("/outline/file", json={"path": str(tmp_path / "Gone.cs")})
	assert r.status_code == 404


def test_invalid_member_order():
	r = client.post("/outline", json={"source": "class C { }", "member_order": "alphabetical"})
	assert r.status_code == 422
