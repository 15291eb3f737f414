from csoutline.model import DelegateDeclaration, EnumDeclaration, Member, Parameter, TypeDeclaration
from csoutline.report import ReportLines, render_report


def sample_declarations():
	return [
		TypeDeclaration(
			kind="Struct",
			name="Point",
			access="public",
			members=[
				Member(kind="Field", name="X", access="public", type_name="int"),
				Member(
					kind="Method",
					name="Offset",
					access="internal",
					type_name="Point",
					parameters=[Parameter(name="dx", type_name="int")],
				),
				Member(kind="Event", name="Moved", access="protected", type_name="Action"),
			],
		),
		EnumDeclaration(name="Axis", access="internal", enum_members=["X", "Y"]),
		DelegateDeclaration(
			name="Mapper",
			access="public",
			return_type="Point",
			parameters=[Parameter(name="source", type_name="Point")],
		),
	]


def test_render_templates():
	assert list(render_report(sample_declarations())) == [
		"public Struct: Point",
		"  public Field: X (Type: int)",
		"  internal Method: Offset",
		"    Parameter: dx (Type: int)",
		"  protected Event: Moved (Type: Action)",
		"internal Enum: Axis",
		"  Enum Member: X",
		"  Enum Member: Y",
		"public Delegate: Mapper (Return Type: Point)",
		"    Parameter: source (Type: Point)",
	]


def test_report_is_restartable():
	report = render_report(sample_declarations())
	assert isinstance(report, ReportLines)
	assert list(report) == list(report)


def test_report_is_lazy():
	lines = iter(render_report(sample_declarations()))
	assert next(lines) == "public Struct: Point"
	assert next(lines) == "  public Field: X (Type: int)"


def test_empty_report():
	assert list(render_report([])) == []
