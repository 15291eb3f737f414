"""Structural outlines of C# source files.

Modules:
- syntax.py: tree-sitter parsing and node helpers.
- access.py: Access level resolution from modifier tokens.
- members.py: Member enumeration for class, struct and interface bodies.
- walker.py: Top-level declaration walking.
- report.py: Rendering declarations as indented text lines.
- model.py: Data structures for declarations and members.
- source.py: Locating and reading source files.
- config.py, errors.py, log.py: Options, exceptions and logging setup.
- outline.py: Entry points tying the above together.
"""

__all__ = [
	"access",
	"config",
	"errors",
	"log",
	"members",
	"model",
	"outline",
	"report",
	"source",
	"syntax",
	"walker",
]
