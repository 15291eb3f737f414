from __future__ import annotations

import logging
import os
from typing import Dict, List

from .errors import MissingSourceError
from .model import SourceFile


logger = logging.getLogger(__name__)

EXTENSION_LANGUAGE: Dict[str, str] = {
	".cs": "csharp",
	".csx": "csharp",
}

IGNORED_DIRS = {".git", ".vs", "bin", "obj", "node_modules", "packages", "TestResults"}


def detect_language(filename: str) -> str:
	_, ext = os.path.splitext(filename)
	return EXTENSION_LANGUAGE.get(ext.lower(), "unknown")


def full_path(path: str) -> str:
	return os.path.abspath(os.path.expanduser(path))


def read_source(path: str, encoding: str = "utf-8") -> str:
	resolved = full_path(path)
	if not os.path.isfile(resolved):
		raise MissingSourceError(resolved)
	# utf-8-sig drops the byte order mark Visual Studio likes to write.
	if encoding.lower().replace("_", "-") == "utf-8":
		encoding = "utf-8-sig"
	with open(resolved, "r", encoding=encoding) as fh:
		return fh.read()


def scan_sources(root: str) -> List[SourceFile]:
	root = full_path(root)
	files: List[SourceFile] = []
	for dirpath, dirnames, filenames in os.walk(root):
		dirnames[:] = sorted(d for d in dirnames if d not in IGNORED_DIRS)
		for filename in sorted(filenames):
			language = detect_language(filename)
			if language != "csharp":
				continue
			path = os.path.join(dirpath, filename)
			files.append(
				SourceFile(
					path=path,
					rel_path=os.path.relpath(path, root),
					language=language,
				)
			)
	logger.debug("Found %d C# files under %s", len(files), root)
	return files
