"""
HTTP calls against ezgif: redirect following and error normalization

Every request of every operation goes through `send`, which turns httpx
failures into EzgifError subclasses.
"""
import logging
from typing import Any, Mapping

import httpx

from .errors import FALLBACK_ERROR_BODY, EzgifError, RedirectionFailed, UpstreamHttpError, UpstreamUnknownError
from .models import UploadForm

logger = logging.getLogger(__name__)


def normalize_error(exc: httpx.HTTPError) -> EzgifError:
    """
    Convert an httpx failure into the package's error type

    Args:
        exc: Any httpx error

    Returns:
        UpstreamHttpError when a response exists, UpstreamUnknownError otherwise
    """
    if not isinstance(exc, httpx.HTTPStatusError):
        return UpstreamUnknownError()
    body = exc.response.text
    return UpstreamHttpError(exc.response.status_code, body if body else FALLBACK_ERROR_BODY)


async def send(client: httpx.AsyncClient, method: str, url: Any, **kwargs) -> httpx.Response:
    """Perform one request, raising a normalized error on failure"""
    try:
        response = await client.request(method, url, **kwargs)
        response.raise_for_status()
    except httpx.HTTPError as e:
        error = normalize_error(e)
        logger.error(f"[ezgif upstream] {method} {url} failed: {e}")
        raise error from e
    return response


def job_id_from_url(url: str) -> str:
    """Last path segment of a job page URL"""
    return httpx.URL(url).path.rstrip("/").split("/")[-1] if url else ""


async def submit_and_follow(client: httpx.AsyncClient, url: str, form: UploadForm) -> str:
    """
    POST an upload form and return the URL the server redirected to

    Args:
        client: HTTP client
        url: Upload endpoint
        form: Multipart body

    Returns:
        Final URL after all redirects

    Raises:
        RedirectionFailed: If the server did not redirect to a job page
    """
    logger.info(f"[ezgif upstream] Uploading to {url}")
    response = await send(
        client,
        "POST",
        url,
        data=form.data,
        files=form.files,
        follow_redirects=True,
    )

    final_url = str(response.url) if response.history else ""
    if not job_id_from_url(final_url):
        raise RedirectionFailed(url)

    logger.info(f"[ezgif upstream] Redirected to {final_url}")
    return final_url


async def fetch_page(client: httpx.AsyncClient, url: str) -> str:
    response = await send(client, "GET", url)
    return response.text


async def submit_params(client: httpx.AsyncClient, page_url: str, params: Mapping[str, Any]) -> str:
    """POST url-encoded params to the ajax endpoint of a job page and return the body"""
    ajax_url = httpx.URL(page_url).copy_merge_params({"ajax": "true"})
    logger.debug(f"[ezgif upstream] Submitting {sorted(params)} to {ajax_url}")
    response = await send(client, "POST", ajax_url, data=dict(params))
    return response.text
