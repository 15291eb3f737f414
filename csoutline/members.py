from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from tree_sitter import Node

from .access import resolve_access
from .model import Member, MemberKind, MemberOrder, Parameter
from .syntax import SourceTree, child_by_field_or_type, declaration_children, named_children


logger = logging.getLogger(__name__)

# Member order of the grouped layout.
GROUP_ORDER: Dict[str, int] = {
	"Property": 0,
	"Field": 1,
	"Constructor": 2,
	"Method": 3,
	"Event": 4,
}


def _parameter(param: Node, tree: SourceTree) -> Parameter:
	name_node = param.child_by_field_name("name")
	if name_node is None:
		# Older grammars leave the name unlabelled; it is the last identifier.
		identifiers = list(named_children(param, "identifier"))
		name_node = identifiers[-1] if identifiers else None
	return Parameter(name=tree.text(name_node), type_name=tree.text(param.child_by_field_name("type")))


def enumerate_parameters(params: Optional[Node], tree: SourceTree) -> List[Parameter]:
	parameters: List[Parameter] = []
	if params is None:
		return parameters
	# A ``params`` array has no node of its own in newer grammars; its type and
	# name are fields of the parameter list itself.
	array_type: Optional[Node] = None
	for i, child in enumerate(params.children):
		field = params.field_name_for_child(i)
		if field == "type":
			array_type = child
		elif field == "name":
			parameters.append(Parameter(name=tree.text(child), type_name=tree.text(array_type)))
			array_type = None
		elif child.type in ("parameter", "parameter_array"):
			parameters.append(_parameter(child, tree))
	return parameters


def _variables(node: Node, tree: SourceTree, kind: MemberKind) -> List[Member]:
	# Field and event-field statements may declare several variables at once.
	declaration = child_by_field_or_type(node, "declaration", "variable_declaration")
	if declaration is None:
		return []
	type_name = tree.text(declaration.child_by_field_name("type"))
	access = resolve_access(tree.modifiers(node), is_top_level_type=False)
	return [
		Member(kind=kind, name=tree.name(variable), access=access, type_name=type_name)
		for variable in named_children(declaration, "variable_declarator")
	]


def _field(node: Node, tree: SourceTree) -> List[Member]:
	return _variables(node, tree, "Field")


def _event(node: Node, tree: SourceTree) -> List[Member]:
	return _variables(node, tree, "Event")


def _property(node: Node, tree: SourceTree) -> List[Member]:
	return [
		Member(
			kind="Property",
			name=tree.name(node),
			access=resolve_access(tree.modifiers(node), is_top_level_type=False),
			type_name=tree.text(node.child_by_field_name("type")),
		)
	]


def _constructor(node: Node, tree: SourceTree) -> List[Member]:
	return [
		Member(
			kind="Constructor",
			name=tree.name(node),
			access=resolve_access(tree.modifiers(node), is_top_level_type=False),
			parameters=enumerate_parameters(
				child_by_field_or_type(node, "parameters", "parameter_list"), tree
			),
		)
	]


def _method(node: Node, tree: SourceTree) -> List[Member]:
	returns = node.child_by_field_name("returns") or node.child_by_field_name("type")
	return [
		Member(
			kind="Method",
			name=tree.name(node),
			access=resolve_access(tree.modifiers(node), is_top_level_type=False),
			type_name=tree.text(returns),
			parameters=enumerate_parameters(
				child_by_field_or_type(node, "parameters", "parameter_list"), tree
			),
		)
	]


# Nested class, struct, interface, enum and delegate declarations have no
# handler: they are not listed as members and their own members are not expanded.
MEMBER_HANDLERS: Dict[str, Callable[[Node, SourceTree], List[Member]]] = {
	"property_declaration": _property,
	"field_declaration": _field,
	"constructor_declaration": _constructor,
	"method_declaration": _method,
	"event_field_declaration": _event,
}


def enumerate_members(body: Optional[Node], tree: SourceTree, order: MemberOrder = "source") -> List[Member]:
	"""List the reportable members of a type body.

	Members come back in source order, interleaved by kind as written. With
	``order="grouped"`` they are regrouped as properties, fields, constructors,
	methods, then events, keeping source order inside each group. Node kinds
	without a handler (indexers, operators, nested types, ...) are skipped.
	"""
	members: List[Member] = []
	for child in declaration_children(body):
		handler = MEMBER_HANDLERS.get(child.type)
		if handler is None:
			if child.type != "comment":
				logger.debug("Skipping member node %s", child.type)
			continue
		members.extend(handler(child, tree))
	if order == "grouped":
		members.sort(key=lambda m: GROUP_ORDER[m.kind])
	return members
