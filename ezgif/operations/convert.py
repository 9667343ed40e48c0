"""
Single-file conversions: upload, follow redirect, submit params, extract
"""
import logging

import httpx

from ..extractor import extract_image_url
from ..forms import build_upload_form
from ..models import ConversionRequest
from ..registry import lookup
from ..upstream import job_id_from_url, submit_and_follow, submit_params

logger = logging.getLogger(__name__)


async def run_conversion(client: httpx.AsyncClient, request: ConversionRequest) -> str:
    """
    Run one conversion against ezgif

    Args:
        client: HTTP client
        request: Validated conversion request

    Returns:
        URL of the converted media
    """
    spec = lookup(request.operation)
    form = build_upload_form(request, spec)

    logger.info(f"[ezgif convert] Starting {spec.id.value}")
    page_url = await submit_and_follow(client, spec.endpoint_url, form)
    job_id = job_id_from_url(page_url)

    params = {**spec.default_params, "file": job_id, **form.params}
    body = await submit_params(client, page_url, params)

    result = extract_image_url(body, spec.delimiters.start, spec.delimiters.end)
    logger.info(f"[ezgif convert] {spec.id.value} finished (job={job_id}): {result}")
    return result
