"""
Async client facade for the ezgif workflows
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import httpx
from pydantic import ValidationError

from .forms import translate_validation_error
from .models import (
    ConversionRequest,
    FrameFile,
    Number,
    Operation,
    OverlayImage,
    OverlayRequest,
    RenderRequest,
    RenderTarget,
)
from .operations import run_conversion, run_overlay, run_render
from .registry import list_operations, lookup, lookup_render_target
from .settings import EZGIF_TIMEOUT, EZGIF_USER_AGENT

logger = logging.getLogger(__name__)

LIST_OPERATIONS = "list"


class EzgifClient:
    """
    Client for the ezgif.com upload/convert workflow

    One instance owns one httpx.AsyncClient. Operations on it are
    independent and may run concurrently.

    Example:
        >>> async with EzgifClient() as client:
        ...     url = await client.convert("webp-mp4", url="https://example.com/a.webp")
    """

    def __init__(
        self,
        timeout: float = EZGIF_TIMEOUT,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": EZGIF_USER_AGENT, **(headers or {})},
            transport=transport,
        )

    async def __aenter__(self) -> "EzgifClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client"""
        await self._client.aclose()

    @staticmethod
    def list_operations() -> List[str]:
        return list_operations()

    async def convert(
        self,
        operation: Union[Operation, str, Mapping[str, Any]],
        file: Optional[bytes] = None,
        url: Optional[str] = None,
        filename: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None,
        **extra: Any
    ) -> Union[str, List[str]]:
        """
        Run a conversion

        Args:
            operation: Operation id, "list" for the listing mode, or a flat
                {type, file, filename, url, ...params} mapping
            file: File bytes to upload
            url: Public URL of the source instead of a file
            filename: Name of the uploaded file, with extension
            params: Operation parameters (keys may contain dashes)
            **extra: More operation parameters

        Returns:
            URL of the result, or the list of operation ids in listing mode
        """
        if isinstance(operation, str) and operation.lower() == LIST_OPERATIONS:
            return list_operations()

        try:
            if isinstance(operation, Mapping):
                lookup(operation.get("type"))
                request = ConversionRequest.from_fields(operation)
            else:
                spec = lookup(operation)
                request = ConversionRequest(
                    operation=spec.id,
                    file=file,
                    url=url,
                    filename=filename,
                    params={**(params or {}), **extra},
                )
        except ValidationError as e:
            raise translate_validation_error(e) from e
        return await run_conversion(self._client, request)

    async def overlay(
        self,
        overlay: Union[OverlayImage, Mapping[str, Any]],
        file: Optional[bytes] = None,
        url: Optional[str] = None,
        filename: Optional[str] = None,
        x: Optional[Number] = 0,
        y: Optional[Number] = 0,
    ) -> str:
        """
        Place `overlay` on top of the base image at (x, y)

        Args:
            overlay: Overlay image as OverlayImage or {file, filename}
            file: Base image bytes
            url: Base image URL instead of a file
            filename: Base image filename
            x: Horizontal offset in pixels
            y: Vertical offset in pixels
        """
        try:
            request = OverlayRequest(file=file, url=url, filename=filename, overlay=overlay, x=x, y=y)
        except ValidationError as e:
            raise translate_validation_error(e) from e
        return await run_overlay(self._client, request)

    async def render(
        self,
        files: Sequence[Union[FrameFile, Mapping[str, Any]]],
        target: Union[RenderTarget, str] = RenderTarget.GIF,
        delay: Number = 20,
        dfrom: int = 1,
        dto: int = 5,
        fader_delay: int = 6,
        fader_frames: int = 10,
        loop: int = 0,
        params: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Assemble frames ({data, name, delay?}) into an animation"""
        lookup_render_target(target)
        try:
            request = RenderRequest(
                target=target,
                files=list(files or []),
                delay=delay,
                dfrom=dfrom,
                dto=dto,
                fader_delay=fader_delay,
                fader_frames=fader_frames,
                loop=loop,
                params=params or {},
            )
        except ValidationError as e:
            raise translate_validation_error(e) from e
        return await run_render(self._client, request)
