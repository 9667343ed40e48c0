"""
Render: assemble uploaded frames into an animation
"""
import logging

import httpx

from ..extractor import extract_frame_ids, extract_image_url
from ..forms import build_render_form
from ..models import RenderRequest
from ..registry import IMAGE_DELIMITERS, lookup_render_target
from ..upstream import fetch_page, job_id_from_url, submit_and_follow, submit_params

logger = logging.getLogger(__name__)


async def run_render(client: httpx.AsyncClient, request: RenderRequest) -> str:
    """
    Render frames into an animation

    The maker page may reorder or rename uploaded frames, so the frame ids
    submitted in the last step are read back from the job page.

    Args:
        client: HTTP client
        request: Frames plus timing and loop settings

    Returns:
        URL of the rendered animation
    """
    endpoint = lookup_render_target(request.target)
    form = build_render_form(request)

    logger.info(f"[ezgif render] Uploading {len(request.files)} frames to {endpoint}")
    page_url = await submit_and_follow(client, endpoint, form)
    job_id = job_id_from_url(page_url)

    frame_ids = extract_frame_ids(await fetch_page(client, page_url))
    logger.info(f"[ezgif render] Job {job_id} has {len(frame_ids)} frames")

    params = {**form.params, "file": job_id, "files[]": frame_ids}
    body = await submit_params(client, page_url, params)
    return extract_image_url(body, IMAGE_DELIMITERS.start, IMAGE_DELIMITERS.end)
