"""GET/POST /api/preview-nft: token SVG previews, no ledger access."""

from __future__ import annotations

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from terminal_render.api.params import parse_int
from terminal_render.layout.timestamps import now_seconds
from terminal_render.models.requests import PreviewRequest
from terminal_render.models.responses import ErrorResponse
from terminal_render.render.engine import ArtifactEngine, RenderedArtifact
from terminal_render.render.onchain import PreviewMessage

router = APIRouter()

# Sample feed for layout checks, newest first
SAMPLE_FEED: list[PreviewMessage] = [
    PreviewMessage("vitalik.eth", "The future of Ethereum is looking bright. Layer 2s are scaling beautifully.", 1737909240, "00FF00"),
    PreviewMessage("punk6529", "NFTs are not just JPEGs. They are programmable property rights on the internet.", 1737908940, "FF00FF"),
    PreviewMessage("cobie", "gm. markets are fake but we're all gonna make it anyway", 1737908640, "00FFFF"),
    PreviewMessage("zeni.eth", "Everyone buy $shibarocketelon! To the moon 2026 Elon will tweet this confirmed 100%", 1737908340, "00FF00"),
    PreviewMessage("jessepollak", "Base is for everyone. Building the global onchain economy one block at a time.", 1737908040, "0000FF"),
    PreviewMessage("dwr.eth", "Farcaster is not a social network. It's a protocol for decentralized social apps.", 1737907740, "FFFF00"),
    PreviewMessage("anoncast", "sometimes the best conversations happen when nobody knows who you are", 1737907440, "FF0000"),
    PreviewMessage("linda.eth", "Art is the only way to run away without leaving home. Minting my thoughts forever.", 1737907140, "FFA500"),
    PreviewMessage("deployer", "Just deployed another contract. Gas fees looking good today.", 1737906840, "00FFFF"),
    PreviewMessage("whale.eth", "Accumulating. Not financial advice. DYOR. NFA. WAGMI. LFG.", 1737906540, "FF00FF"),
    PreviewMessage("builder", "Ship ship ship. That's all we do. Every day we ship.", 1737906240, "00FF00"),
    PreviewMessage("cryptopunk", "Been in this space since 2017. Seen it all. Still here. Still building.", 1737905940, "FFFF00"),
    PreviewMessage("anon", "hello world from the public terminal", 1737905640, "0000FF"),
    PreviewMessage("based.eth", "Onchain summer never ends when you're building on Base", 1737905340, "FF0000"),
    PreviewMessage("gm.eth", "gm to everyone except those who don't say gm back", 1737905040, "FFA500"),
]

_DEFAULT_USERNAME = "anon"
_DEFAULT_TEXT = "Hello, Public Terminal!"


def _svg_response(artifact: RenderedArtifact) -> Response:
    return Response(
        content=artifact.content,
        media_type=artifact.media_type,
        headers={"Cache-Control": "no-cache"},
    )


@router.get("/preview-nft")
async def preview_get(
    kind: str = Query("message", alias="type", description="message | feed"),
    username: str | None = Query(None),
    text: str | None = Query(None),
    timestamp: str | None = Query(None, description="Unix seconds; defaults to now"),
) -> Response:
    if kind == "feed":
        return _svg_response(ArtifactEngine.preview_feed(SAMPLE_FEED))

    ts = parse_int(timestamp)
    artifact = ArtifactEngine.preview_message(
        username or _DEFAULT_USERNAME,
        text or _DEFAULT_TEXT,
        ts if ts is not None else now_seconds(),
    )
    return _svg_response(artifact)


@router.post("/preview-nft")
async def preview_post(request: Request) -> Response:
    try:
        req = PreviewRequest.model_validate(await request.json())
    except (ValueError, ValidationError):
        return JSONResponse(ErrorResponse(error="Invalid request").model_dump(), status_code=400)

    if req.type == "feed":
        messages = (
            [PreviewMessage(m.username, m.text, m.timestamp, m.color) for m in req.messages]
            if req.messages is not None
            else SAMPLE_FEED
        )
        return _svg_response(ArtifactEngine.preview_feed(messages))

    ts = req.timestamp if req.timestamp is not None else now_seconds()
    return _svg_response(ArtifactEngine.preview_message(req.username, req.text, ts))
