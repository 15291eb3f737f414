from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, List, Tuple

from .model import Declaration, DelegateDeclaration, EnumDeclaration, Member, Parameter, TypeDeclaration


MEMBER_INDENT = "  "
PARAMETER_INDENT = "    "


def _parameter_lines(parameters: List[Parameter]) -> Iterator[str]:
	for p in parameters:
		yield f"{PARAMETER_INDENT}Parameter: {p.name} (Type: {p.type_name})"


def _member_lines(member: Member) -> Iterator[str]:
	if member.kind in ("Constructor", "Method"):
		yield f"{MEMBER_INDENT}{member.access} {member.kind}: {member.name}"
		yield from _parameter_lines(member.parameters)
	else:
		yield f"{MEMBER_INDENT}{member.access} {member.kind}: {member.name} (Type: {member.type_name})"


def _type_lines(decl: TypeDeclaration) -> Iterator[str]:
	yield f"{decl.access} {decl.kind}: {decl.name}"
	for member in decl.members:
		yield from _member_lines(member)


def _enum_lines(decl: EnumDeclaration) -> Iterator[str]:
	yield f"{decl.access} Enum: {decl.name}"
	for name in decl.enum_members:
		yield f"{MEMBER_INDENT}Enum Member: {name}"


def _delegate_lines(decl: DelegateDeclaration) -> Iterator[str]:
	yield f"{decl.access} Delegate: {decl.name} (Return Type: {decl.return_type})"
	yield from _parameter_lines(decl.parameters)


RENDERERS: Dict[str, Callable[..., Iterator[str]]] = {
	"Class": _type_lines,
	"Struct": _type_lines,
	"Interface": _type_lines,
	"Enum": _enum_lines,
	"Delegate": _delegate_lines,
}


class ReportLines:
	"""Lazily rendered report; every iteration starts again from the first line."""

	def __init__(self, declarations: Iterable[Declaration]):
		self.declarations: Tuple[Declaration, ...] = tuple(declarations)

	def __iter__(self) -> Iterator[str]:
		for decl in self.declarations:
			yield from RENDERERS[decl.kind](decl)


def render_report(declarations: Iterable[Declaration]) -> ReportLines:
	return ReportLines(declarations)
