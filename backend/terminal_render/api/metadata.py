"""GET /api/metadata/{id}: supplementary token metadata JSON.

The token image itself comes from the contract's tokenURI; this endpoint
only describes the record behind it.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from terminal_render.api.params import parse_id
from terminal_render.config import settings
from terminal_render.dependencies import get_ledger
from terminal_render.layout.timestamps import format_iso
from terminal_render.ledger.protocols import Ledger
from terminal_render.models.responses import ErrorResponse, MetadataAttribute, MetadataResponse

router = APIRouter()


@router.get("/metadata/{record_id}", response_model=MetadataResponse)
async def token_metadata(record_id: str, ledger: Ledger = Depends(get_ledger)) -> JSONResponse:
    rid = parse_id(record_id)
    if rid is None:
        return JSONResponse(ErrorResponse(error="bad id").model_dump(), status_code=400)

    result = await ledger.read_record(rid)
    if not result.ok:
        return JSONResponse(ErrorResponse(error="Message not found").model_dump(), status_code=404)

    record = result.record
    meta = MetadataResponse(
        name=f"PUBLIC_TERMINAL #{rid}",
        description=record.text,
        attributes=[
            MetadataAttribute(trait_type="Author", value=record.username),
            MetadataAttribute(trait_type="FID", value=str(record.fid)),
            MetadataAttribute(trait_type="Color", value=record.color),
            MetadataAttribute(trait_type="Timestamp", value=format_iso(record.timestamp)),
        ],
        external_url=f"{settings.public_url.rstrip('/')}/artifact/{rid}",
    )
    return JSONResponse(meta.model_dump(), headers={"Cache-Control": "public, max-age=600"})
