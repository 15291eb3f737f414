from __future__ import annotations

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from csoutline.config import OutlineOptions
from csoutline.errors import MissingSourceError
from csoutline.model import MemberOrder, OutlineResult
from csoutline.outline import outline_file, outline_source
from csoutline.report import render_report


app = FastAPI(title="C# Outline")


class OutlineRequest(BaseModel):
	source: str
	member_order: MemberOrder = "source"


class OutlineFileRequest(BaseModel):
	path: str
	member_order: MemberOrder = "source"
	encoding: str = "utf-8"


@app.post("/outline", response_model=OutlineResult)
def outline(req: OutlineRequest) -> OutlineResult:
	declarations = outline_source(req.source, OutlineOptions(member_order=req.member_order))
	return OutlineResult(declarations=declarations, lines=list(render_report(declarations)))


@app.post("/outline/file", response_model=OutlineResult)
def outline_path(req: OutlineFileRequest) -> OutlineResult:
	options = OutlineOptions(member_order=req.member_order, encoding=req.encoding)
	try:
		return outline_file(req.path, options)
	except MissingSourceError as e:
		raise HTTPException(status_code=404, detail=str(e))


def create_app() -> FastAPI:
	return app
