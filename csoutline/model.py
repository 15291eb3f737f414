from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


AccessLevel = Literal["public", "private", "protected", "internal"]
TypeKind = Literal["Class", "Struct", "Interface"]
MemberKind = Literal["Property", "Field", "Constructor", "Method", "Event"]
MemberOrder = Literal["source", "grouped"]


class SourceFile(BaseModel):
	path: str
	rel_path: str
	language: str


class Parameter(BaseModel):
	name: str
	type_name: str


class Member(BaseModel):
	kind: MemberKind
	name: str
	access: AccessLevel
	# Raw type text; the return type for methods, empty for constructors.
	type_name: str = ""
	parameters: List[Parameter] = []


class TypeDeclaration(BaseModel):
	kind: TypeKind
	name: str
	access: AccessLevel
	members: List[Member] = []


class EnumDeclaration(BaseModel):
	kind: Literal["Enum"] = "Enum"
	name: str
	access: AccessLevel
	enum_members: List[str] = []


class DelegateDeclaration(BaseModel):
	kind: Literal["Delegate"] = "Delegate"
	name: str
	access: AccessLevel
	return_type: str
	parameters: List[Parameter] = []


Declaration = Annotated[
	Union[TypeDeclaration, EnumDeclaration, DelegateDeclaration],
	Field(discriminator="kind"),
]


class OutlineResult(BaseModel):
	path: Optional[str] = None
	declarations: List[Declaration] = []
	lines: List[str] = []
