"""Figma REST API client: where design trees come from.

Only read endpoints are used (documents, nodes, rendered images). A failed
call raises FigmaClientError; nothing is retried.

Environment:
    FIGMA_TOKEN: personal access token, sent as X-FIGMA-TOKEN
    FIGMA_API_BASE, FIGMA_HTTP_TIMEOUT: see figma_codegen/config.py

Usage:
    async with FigmaClient() as client:
        login = await client.fetch_document("6kGd851qaAX4TiL44vpIrO", "16650:538")
"""

import logging
import os
from typing import Any, Dict, List, Optional

import httpx

from .. import config

logger = logging.getLogger(__name__)

_STATUS_ERRORS = {
    403: "Figma API returned 403 Forbidden for {path}. FIGMA_TOKEN must be valid "
         "and carry the file_content:read scope.",
    404: "Figma resource not found: {path}",
    429: "Figma API rate limit exceeded on {path}. Retry later.",
}


class FigmaClientError(Exception):
    """Raised when a Figma API call fails."""


class FigmaClient:
    """Async reader for Figma files.

    Args:
        token: Personal access token; FIGMA_TOKEN is used when omitted.
        timeout: Per-request timeout in seconds.
        base_url: API root; FIGMA_API_BASE is used when omitted.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        base_url: Optional[str] = None,
    ):
        self._token = token or os.getenv("FIGMA_TOKEN", "")
        if not self._token:
            raise FigmaClientError(
                "No Figma token: set the FIGMA_TOKEN environment variable "
                "or pass token= to FigmaClient()."
            )
        self._timeout = config.FIGMA_HTTP_TIMEOUT if timeout is None else timeout
        self._base_url = base_url or config.FIGMA_API_BASE
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "FigmaClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"X-FIGMA-TOKEN": self._token},
                timeout=self._timeout,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def _get(self, path: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """GET `path` and return the decoded JSON body."""
        http = await self._get_client()
        try:
            resp = await http.get(path, params=params)
        except httpx.TimeoutException as e:
            raise FigmaClientError(f"Figma API timeout after {self._timeout}s: {path}") from e
        except httpx.ConnectError as e:
            raise FigmaClientError(f"Figma API connection error: {path}") from e

        if resp.status_code in _STATUS_ERRORS:
            raise FigmaClientError(_STATUS_ERRORS[resp.status_code].format(path=path))
        if resp.status_code != 200:
            raise FigmaClientError(
                f"Figma API error {resp.status_code} on {path}: {resp.text[:200]}"
            )
        return resp.json()

    # ------------------------------------------------------------------
    # Design source
    # ------------------------------------------------------------------

    async def fetch_document(self, file_key: str, node_id: Optional[str] = None) -> Dict[str, Any]:
        """Document tree of a whole file, or of the node `node_id` in it.

        GET /v1/files/:key
        GET /v1/files/:key/nodes?ids=:node_id
        """
        if not node_id:
            data = await self._get(f"/v1/files/{file_key}")
            document = data.get("document")
            if not document:
                raise FigmaClientError(f"Figma file {file_key} has no document")
            logger.info(f"fetch_document: file={file_key}, name={data.get('name')}")
            return document

        data = await self._get(f"/v1/files/{file_key}/nodes", params={"ids": node_id})
        nodes = data.get("nodes") or {}
        entry = nodes.get(node_id)
        if entry is None and nodes:
            # Figma answers with the canonical id ("1-2" is keyed as "1:2")
            entry = next(iter(nodes.values()))
        if not entry or not entry.get("document"):
            raise FigmaClientError(f"Node {node_id} not found in Figma file {file_key}")

        document = entry["document"]
        logger.info(
            f"fetch_document: file={file_key}, node={node_id}, name={document.get('name')}"
        )
        return document

    async def get_file_pages(self, file_key: str) -> List[Dict[str, Any]]:
        """The file's pages (top-level CANVAS nodes)."""
        pages = (await self.fetch_document(file_key)).get("children") or []
        logger.info(f"get_file_pages: file={file_key}, pages={[p.get('name') for p in pages]}")
        return pages

    async def get_images(
        self,
        file_key: str,
        node_ids: List[str],
        fmt: str = "png",
        scale: int = 2,
    ) -> Dict[str, Optional[str]]:
        """Rendered image URL per node id (None where Figma could not render).

        GET /v1/images/:key?ids=...&format=...&scale=...
        """
        params = {"ids": ",".join(node_ids), "format": fmt, "scale": str(scale)}
        data = await self._get(f"/v1/images/{file_key}", params=params)
        if data.get("err"):
            raise FigmaClientError(f"Figma image render error: {data['err']}")

        images = data.get("images") or {}
        missing = [node_id for node_id, url in images.items() if not url]
        logger.info(f"get_images: file={file_key}, requested={len(node_ids)}, missing={missing}")
        return images
