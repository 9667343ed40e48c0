"""
Overlay: place one image on top of another
"""
import logging

import httpx

from ..extractor import extract_image_url
from ..forms import build_overlay_form, build_overlay_image_form
from ..models import OverlayRequest
from ..registry import IMAGE_DELIMITERS, OVERLAY_ENDPOINT
from ..upstream import job_id_from_url, submit_and_follow, submit_params

logger = logging.getLogger(__name__)


async def run_overlay(client: httpx.AsyncClient, request: OverlayRequest) -> str:
    """
    Upload the base image, then the overlay onto the same job, then
    submit the overlay position.

    Args:
        client: HTTP client
        request: Overlay request with both images

    Returns:
        URL of the composed image
    """
    form = build_overlay_form(request)

    page_url = await submit_and_follow(client, OVERLAY_ENDPOINT, form)
    base_id = job_id_from_url(page_url)
    logger.info(f"[ezgif overlay] Base image uploaded (job={base_id})")

    overlay_url = await submit_and_follow(client, page_url, build_overlay_image_form(request))
    overlay_id = job_id_from_url(overlay_url)
    logger.info(f"[ezgif overlay] Overlay image uploaded (overlay={overlay_id})")

    params = {
        "file": base_id,
        "overlay-file": overlay_id,
        **form.params,
    }
    body = await submit_params(client, overlay_url, params)
    return extract_image_url(body, IMAGE_DELIMITERS.start, IMAGE_DELIMITERS.end)
