"""Slot catalog and render models."""

from typing import Any

from pydantic import BaseModel, Field


class SlotInfo(BaseModel):
    slot: str
    contract: str
    props: list[str]
    required: list[str]
    registered: int = 0


class SlotListResponse(BaseModel):
    slots: list[SlotInfo]


class RenderRequest(BaseModel):
    """Props shared by every component in the slot."""

    props: dict[str, Any] = Field(default_factory=dict)


class RenderedChild(BaseModel):
    key: str
    slot: str
    output: Any = None


class RenderResponse(BaseModel):
    """Rendered children in registration order.

    Components that render nothing for this tenant are omitted.
    """

    slot: str
    children: list[RenderedChild]
