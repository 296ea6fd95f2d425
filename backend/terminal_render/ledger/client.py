"""JSON-RPC ledger client for the message contract.

All reads go through ``eth_call``. ``read_many`` sends a single JSON-RPC
batch so a window of neighbors costs one round trip; each entry in the
batch succeeds or fails on its own.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx
from eth_abi.exceptions import DecodingError

from terminal_render.ledger.abi import (
    decode_message,
    decode_uint,
    encode_get_message,
    encode_get_message_count,
)
from terminal_render.models.records import ReadResult

logger = logging.getLogger(__name__)


class LedgerError(Exception):
    """Transport or protocol failure talking to the RPC endpoint."""


class LedgerClient:
    """Async reader for the message contract.

    Args:
        rpc_url: JSON-RPC endpoint.
        contract_address: Message contract address.
        timeout: Per-request timeout in seconds.
        transport: Optional custom transport (useful for testing).
    """

    def __init__(
        self,
        rpc_url: str,
        contract_address: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.rpc_url = rpc_url
        self.contract_address = contract_address
        self.timeout = timeout
        self._transport = transport

    def _eth_call(self, request_id: int, data: str) -> dict[str, Any]:
        return {
            "jsonrpc": "2.0",
            "id": request_id,
            "method": "eth_call",
            "params": [{"to": self.contract_address, "data": data}, "latest"],
        }

    async def _post(self, payload: Any) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(self.rpc_url, json=payload)
        except httpx.HTTPError as e:
            raise LedgerError(f"RPC request failed: {e}") from e

        if resp.status_code != 200:
            raise LedgerError(f"RPC returned HTTP {resp.status_code}")
        try:
            return resp.json()
        except ValueError as e:
            raise LedgerError("RPC returned non-JSON body") from e

    async def read_many(self, record_ids: Sequence[int]) -> list[ReadResult]:
        if not record_ids:
            return []

        payload = [self._eth_call(i, encode_get_message(rid)) for i, rid in enumerate(record_ids)]
        try:
            body = await self._post(payload)
        except LedgerError as e:
            logger.warning("Batch read of %d records failed: %s", len(record_ids), e)
            return [ReadResult(rid, error=str(e)) for rid in record_ids]

        if not isinstance(body, list):
            logger.warning("Batch read returned %s, expected a list", type(body).__name__)
            return [ReadResult(rid, error="malformed batch response") for rid in record_ids]

        by_request = {item.get("id"): item for item in body if isinstance(item, dict)}
        results = [_to_result(rid, by_request.get(i)) for i, rid in enumerate(record_ids)]

        logger.debug(
            "Batch read: %d/%d records resolved",
            sum(1 for r in results if r.ok),
            len(results),
        )
        return results

    async def read_record(self, record_id: int) -> ReadResult:
        return (await self.read_many([record_id]))[0]

    async def read_count(self) -> int | None:
        try:
            body = await self._post(self._eth_call(0, encode_get_message_count()))
            return decode_uint(body["result"])
        except (LedgerError, KeyError, TypeError, ValueError, DecodingError) as e:
            logger.warning("Message count read failed: %s", e)
            return None


def _to_result(record_id: int, item: dict[str, Any] | None) -> ReadResult:
    """Map one batch response entry to a ReadResult."""
    if item is None:
        return ReadResult(record_id, error="missing from batch response")

    if item.get("error"):
        err = item["error"]
        message = err.get("message", str(err)) if isinstance(err, dict) else str(err)
        return ReadResult(record_id, error=message)

    data = item.get("result")
    if not isinstance(data, str) or data in ("", "0x"):
        return ReadResult(record_id, error="empty result")

    try:
        record = decode_message(data)
    except (DecodingError, ValueError) as e:
        return ReadResult(record_id, error=f"decode failed: {e}")

    if record is None:
        return ReadResult(record_id, error="not minted")
    return ReadResult(record_id, record=record)
