"""GET /api/opengraph-image/*: social preview images for shared transmissions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from terminal_render.api.params import parse_fallback, parse_id, parse_int
from terminal_render.dependencies import get_engine
from terminal_render.render.engine import (
    ArtifactEngine,
    ArtifactRequest,
    ArtifactSize,
    OutputFormat,
    RenderedArtifact,
)

router = APIRouter(prefix="/opengraph-image")


def artifact_response(artifact: RenderedArtifact) -> Response:
    return Response(
        content=artifact.content,
        media_type=artifact.media_type,
        headers={
            "Cache-Control": "no-store",
            "X-Artifact-Mode": artifact.mode.value,
            "X-Artifact-Width": str(artifact.width),
            "X-Artifact-Height": str(artifact.height),
        },
    )


@router.get("/mint")
async def mint_image(
    token_id: str | None = Query(None, alias="tokenId"),
    total: str | None = Query(None),
    username: str | None = Query(None, description="Fallback username for a just-minted target"),
    text: str | None = Query(None, description="Fallback text for a just-minted target"),
    color: str | None = Query(None, description="Fallback label color, #rrggbb"),
    timestamp: str | None = Query(None, description="Fallback Unix seconds"),
    size: ArtifactSize = Query(ArtifactSize.WIDE),
    fmt: OutputFormat = Query(OutputFormat.PNG, alias="format"),
    engine: ArtifactEngine = Depends(get_engine),
) -> Response:
    """Feed-context image around ``tokenId``, or the promotional card."""
    artifact = await engine.render(
        ArtifactRequest(
            target_id=parse_id(token_id),
            total=parse_int(total),
            fallback=parse_fallback(username, text, color, timestamp),
            size=size,
            format=fmt,
        )
    )
    return artifact_response(artifact)


@router.get("/transmission")
async def transmission_image(
    token_id: str | None = Query(None, alias="tokenId"),
    total: str | None = Query(None),
    username: str | None = Query(None),
    text: str | None = Query(None),
    color: str | None = Query(None),
    timestamp: str | None = Query(None),
    fmt: OutputFormat = Query(OutputFormat.PNG, alias="format"),
    engine: ArtifactEngine = Depends(get_engine),
) -> Response:
    """Single-message receipt for ``tokenId``, or the promotional card."""
    artifact = await engine.render(
        ArtifactRequest(
            target_id=parse_id(token_id),
            total=parse_int(total),
            fallback=parse_fallback(username, text, color, timestamp),
            size=ArtifactSize.SINGLE,
            format=fmt,
        )
    )
    return artifact_response(artifact)
