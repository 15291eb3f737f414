from __future__ import annotations

from typing import Iterator, Optional, Set

import tree_sitter_c_sharp as tscsharp
from tree_sitter import Language, Node, Parser


CSHARP_LANGUAGE = Language(tscsharp.language())


class SourceTree:
	"""A C# compilation unit parsed with tree-sitter.

	Node text is sliced from the encoded source, so type references come back
	exactly as written. Parsing never fails: tree-sitter recovers from syntax
	errors by wrapping the offending text in ``ERROR`` nodes.
	"""

	def __init__(self, text: str):
		self.source = text.encode("utf-8")
		# One parser per tree; parsers are not shared between calls.
		self.tree = Parser(CSHARP_LANGUAGE).parse(self.source)

	@property
	def root(self) -> Node:
		return self.tree.root_node

	def text(self, node: Optional[Node], default: str = "") -> str:
		if node is None:
			return default
		return self.source[node.start_byte:node.end_byte].decode("utf-8", errors="replace").strip()

	def modifiers(self, node: Node) -> Set[str]:
		return {self.text(child) for child in node.children if child.type == "modifier"}

	def name(self, node: Node) -> str:
		return self.text(child_by_field_or_type(node, "name", "identifier"))


def named_children(node: Optional[Node], *types: str) -> Iterator[Node]:
	if node is None:
		return
	for child in node.named_children:
		if not types or child.type in types:
			yield child


def child_by_field_or_type(node: Node, field: str, *types: str) -> Optional[Node]:
	"""Return the child stored under ``field``, else the first child of one of ``types``.

	Field names have moved between releases of the C# grammar, so the type
	lookup keeps older and newer trees working alike.
	"""
	found = node.child_by_field_name(field)
	if found is not None:
		return found
	return next(named_children(node, *types), None) if types else None


PREPROC_BLOCKS = ("preproc_if", "preproc_elif", "preproc_else")


def declaration_children(node: Optional[Node]) -> Iterator[Node]:
	"""Named children with ``#if``/``#elif``/``#else`` blocks flattened in place.

	Every branch is reported; no preprocessor symbols are evaluated.
	"""
	for child in named_children(node):
		if child.type in PREPROC_BLOCKS:
			yield from declaration_children(child)
		else:
			yield child
