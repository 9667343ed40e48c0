"""
Module-level entry points; each call opens and closes its own client
"""
from typing import Any, List, Union

from .client import EzgifClient
from .models import Operation


async def convert(operation, **kwargs) -> Union[str, List[str]]:
    async with EzgifClient() as client:
        return await client.convert(operation, **kwargs)


async def overlay(overlay, **kwargs) -> str:
    async with EzgifClient() as client:
        return await client.overlay(overlay, **kwargs)


async def render(files, **kwargs) -> str:
    async with EzgifClient() as client:
        return await client.render(files, **kwargs)


def list_operations() -> List[str]:
    return EzgifClient.list_operations()


async def webp2mp4(url: str, **params: Any) -> str:
    return await convert(Operation.WEBP_MP4, url=url, **params)


async def webp2img(url: str, **params: Any) -> str:
    return await convert(Operation.WEBP_PNG, url=url, **params)


async def img2webp(url: str, **params: Any) -> str:
    return await convert(Operation.PNG_WEBP, url=url, **params)


async def vid2webp(url: str, **params: Any) -> str:
    return await convert(Operation.VIDEO_WEBP, url=url, **params)


async def vid2gif(url: str, **params: Any) -> str:
    return await convert(Operation.VIDEO_GIF, url=url, **params)


async def gif2mp4(url: str, **params: Any) -> str:
    return await convert(Operation.GIF_MP4, url=url, **params)


async def gif2webp(url: str, **params: Any) -> str:
    return await convert(Operation.GIF_WEBP, url=url, **params)
