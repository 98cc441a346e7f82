"""Pydantic models for Slack blocks and API request/response."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class PlainText(BaseModel):
    type: Literal["plain_text"] = "plain_text"
    text: str


class MrkdwnText(BaseModel):
    type: Literal["mrkdwn"] = "mrkdwn"
    text: str
    verbatim: bool = True


class HeaderBlock(BaseModel):
    type: Literal["header"] = "header"
    text: PlainText


class DividerBlock(BaseModel):
    type: Literal["divider"] = "divider"


class SectionBlock(BaseModel):
    type: Literal["section"] = "section"
    text: MrkdwnText


Block = Annotated[Union[HeaderBlock, DividerBlock, SectionBlock], Field(discriminator="type")]


class SlackMessage(BaseModel):
    text: str
    blocks: list[Block] = Field(default_factory=list)


class ConvertRequest(BaseModel):
    markdown: str
    text: str | None = None
    header: str | None = None


ConvertResponse = Union[SlackMessage, list[Block]]


class HealthResponse(BaseModel):
    status: str = "ok"
