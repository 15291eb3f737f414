from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, List, Optional

from tree_sitter import Node

from .access import resolve_access
from .config import OutlineOptions
from .members import enumerate_members, enumerate_parameters
from .model import Declaration, DelegateDeclaration, EnumDeclaration, TypeDeclaration
from .syntax import SourceTree, child_by_field_or_type, declaration_children, named_children


logger = logging.getLogger(__name__)

TYPE_KINDS: Dict[str, str] = {
	"class_declaration": "Class",
	"struct_declaration": "Struct",
	"interface_declaration": "Interface",
}


def _top_level_nodes(container: Node) -> Iterator[Node]:
	# Children of the compilation unit or of a namespace body, namespaces and
	# #if/#elif/#else blocks flattened in place so the order stays the source order.
	for child in declaration_children(container):
		if child.type == "namespace_declaration":
			body = child_by_field_or_type(child, "body", "declaration_list")
			if body is not None:
				yield from _top_level_nodes(body)
		elif child.type == "file_scoped_namespace_declaration":
			# Some grammar releases nest the declarations inside the node.
			yield from _top_level_nodes(child)
		else:
			yield child


def _type(node: Node, tree: SourceTree, options: OutlineOptions) -> TypeDeclaration:
	return TypeDeclaration(
		kind=TYPE_KINDS[node.type],
		name=tree.name(node),
		access=resolve_access(tree.modifiers(node), is_top_level_type=True),
		members=enumerate_members(
			child_by_field_or_type(node, "body", "declaration_list"), tree, options.member_order
		),
	)


def _enum(node: Node, tree: SourceTree, options: OutlineOptions) -> EnumDeclaration:
	body = child_by_field_or_type(node, "body", "enum_member_declaration_list")
	return EnumDeclaration(
		name=tree.name(node),
		access=resolve_access(tree.modifiers(node), is_top_level_type=True),
		enum_members=[tree.name(m) for m in named_children(body, "enum_member_declaration")],
	)


def _delegate(node: Node, tree: SourceTree, options: OutlineOptions) -> DelegateDeclaration:
	returns = node.child_by_field_name("type") or node.child_by_field_name("return_type")
	return DelegateDeclaration(
		name=tree.name(node),
		access=resolve_access(tree.modifiers(node), is_top_level_type=True),
		return_type=tree.text(returns),
		parameters=enumerate_parameters(
			child_by_field_or_type(node, "parameters", "parameter_list"), tree
		),
	)


DECLARATION_HANDLERS: Dict[str, Callable[[Node, SourceTree, OutlineOptions], Declaration]] = {
	"class_declaration": _type,
	"struct_declaration": _type,
	"interface_declaration": _type,
	"enum_declaration": _enum,
	"delegate_declaration": _delegate,
}


def walk_declarations(tree: SourceTree, options: Optional[OutlineOptions] = None) -> List[Declaration]:
	"""Collect the top-level declarations of a parsed file in source order.

	Only nodes whose parent is the compilation unit or a namespace body are
	considered. Types nested in other types are never reported on their own.
	"""
	options = options or OutlineOptions()
	declarations: List[Declaration] = []
	for node in _top_level_nodes(tree.root):
		handler = DECLARATION_HANDLERS.get(node.type)
		if handler is None:
			continue
		declarations.append(handler(node, tree, options))
	logger.debug("Collected %d top-level declarations", len(declarations))
	return declarations
