from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .config import OutlineOptions
from .errors import MissingSourceError
from .model import Declaration, OutlineResult
from .report import ReportLines, render_report
from .source import full_path, read_source
from .syntax import SourceTree
from .walker import walk_declarations


logger = logging.getLogger(__name__)


def outline_source(text: str, options: Optional[OutlineOptions] = None) -> List[Declaration]:
	return walk_declarations(SourceTree(text), options)


def outline_lines(text: str, options: Optional[OutlineOptions] = None) -> ReportLines:
	return render_report(outline_source(text, options))


def outline_file(path: str, options: Optional[OutlineOptions] = None) -> OutlineResult:
	options = options or OutlineOptions()
	text = read_source(path, options.encoding)
	declarations = outline_source(text, options)
	return OutlineResult(
		path=full_path(path),
		declarations=declarations,
		lines=list(render_report(declarations)),
	)


def write_doc(path: str, sink: Callable[[str], None] = print, options: Optional[OutlineOptions] = None) -> bool:
	"""Write the outline of one file to ``sink``, one line per call.

	The header names the resolved path. A missing file produces a notice
	instead of report lines and returns False.
	"""
	options = options or OutlineOptions()
	sink("Reading source code from:")
	sink(full_path(path))
	try:
		text = read_source(path, options.encoding)
	except MissingSourceError as e:
		logger.warning("%s", e)
		sink("File doesn't exist, exiting")
		return False
	for line in outline_lines(text, options):
		sink(line)
	return True
