from pydantic import BaseModel

from .model import MemberOrder


class OutlineOptions(BaseModel):
	member_order: MemberOrder = "source"
	encoding: str = "utf-8"
