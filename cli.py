from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List, Optional

import uvicorn

from csoutline.config import OutlineOptions
from csoutline.errors import MissingSourceError
from csoutline.log import setup_logging
from csoutline.outline import outline_file, write_doc
from csoutline.source import scan_sources


def _expand_paths(paths: List[str]) -> List[str]:
	expanded: List[str] = []
	for p in paths:
		if os.path.isdir(p):
			expanded.extend(f.path for f in scan_sources(p))
		else:
			expanded.append(p)
	return expanded


def cmd_outline(args: argparse.Namespace) -> int:
	options = OutlineOptions(
		member_order="grouped" if args.group_members else "source",
		encoding=args.encoding,
	)
	missing = 0
	if args.json:
		results = []
		for path in _expand_paths(args.paths):
			try:
				results.append(outline_file(path, options).model_dump())
			except MissingSourceError as e:
				print(str(e), file=sys.stderr)
				missing += 1
		print(json.dumps(results, indent=2))
	else:
		for path in _expand_paths(args.paths):
			if not write_doc(path, print, options):
				missing += 1
	return 1 if missing else 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def main(argv: Optional[List[str]] = None) -> int:
	parser = argparse.ArgumentParser(prog="csoutline")
	parser.add_argument("--log-level", default="WARNING")
	sub = parser.add_subparsers(dest="cmd", required=True)

	po = sub.add_parser("outline", help="Print the declaration outline of C# files")
	po.add_argument("paths", nargs="+", help="Source files or directories to scan for .cs files")
	po.add_argument("--json", action="store_true", help="Print outline results as JSON")
	po.add_argument("--group-members", action="store_true", help="Group members by kind instead of source order")
	po.add_argument("--encoding", default="utf-8")
	po.set_defaults(func=cmd_outline)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)

	args = parser.parse_args(argv)
	setup_logging(args.log_level)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
