"""Slot catalog and render router."""

from fastapi import APIRouter, Request

from complianceos_core.api.models import (
    RenderedChild,
    RenderRequest,
    RenderResponse,
    SlotInfo,
    SlotListResponse,
)
from complianceos_core.errors import create_error
from complianceos_core.extensions import SlotName, describe_slots, missing_props, render_slot

slot_router = APIRouter(prefix="/slots", tags=["Slots"])


@slot_router.get("", response_model=SlotListResponse)
async def list_slots(request: Request) -> SlotListResponse:
    """List every catalog slot with its prop contract."""
    counts = request.app.state.registry.counts()
    return SlotListResponse(
        slots=[
            SlotInfo(**entry, registered=counts.get(entry["slot"], 0))
            for entry in describe_slots()
        ]
    )


@slot_router.post("/{slot}/render", response_model=RenderResponse)
async def render(slot: SlotName, body: RenderRequest, request: Request) -> RenderResponse:
    """Render a slot with the given props."""
    missing = missing_props(slot, body.props)
    if missing:
        raise create_error(
            "SLOT_PROPS_INVALID",
            slot=slot.value,
            detail=f"Missing required props: {', '.join(missing)}",
        )

    rendered = render_slot(slot, body.props, registry=request.app.state.registry)
    return RenderResponse(
        slot=slot.value,
        children=[
            RenderedChild(key=child.key, slot=child.slot.value, output=child.output)
            for child in rendered
            if child.output is not None
        ],
    )
