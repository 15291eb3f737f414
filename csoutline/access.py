from __future__ import annotations

from typing import Iterable, Tuple

from .model import AccessLevel


# Checked in this order; the first keyword present wins. A compound
# "protected internal" therefore resolves to "protected".
ACCESS_PRIORITY: Tuple[AccessLevel, ...] = ("public", "private", "protected", "internal")

TOP_LEVEL_DEFAULT: AccessLevel = "internal"
MEMBER_DEFAULT: AccessLevel = "private"


def resolve_access(modifiers: Iterable[str], is_top_level_type: bool) -> AccessLevel:
	"""Map a declaration's modifier tokens to one access level.

	``is_top_level_type`` selects the default used when no access keyword is
	written: ``internal`` for top-level types, ``private`` for members.
	"""
	present = set(modifiers)
	for level in ACCESS_PRIORITY:
		if level in present:
			return level
	return TOP_LEVEL_DEFAULT if is_top_level_type else MEMBER_DEFAULT
