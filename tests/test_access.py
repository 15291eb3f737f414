import pytest

from csoutline.access import resolve_access


@pytest.mark.parametrize("keyword", ["public", "private", "protected", "internal"])
def test_single_keyword_wins_in_any_context(keyword):
	assert resolve_access([keyword], is_top_level_type=True) == keyword
	assert resolve_access([keyword], is_top_level_type=False) == keyword


def test_defaults_depend_on_context():
	assert resolve_access([], is_top_level_type=True) == "internal"
	assert resolve_access([], is_top_level_type=False) == "private"


def test_non_access_modifiers_fall_back_to_default():
	assert resolve_access(["static", "readonly"], is_top_level_type=False) == "private"
	assert resolve_access({"sealed", "partial"}, is_top_level_type=True) == "internal"


def test_compound_modifiers_collapse_by_priority():
	assert resolve_access(["protected", "internal"], is_top_level_type=False) == "protected"
	assert resolve_access(["internal", "protected"], is_top_level_type=False) == "protected"
	assert resolve_access(["private", "protected"], is_top_level_type=False) == "private"
