"""
Result extraction from ezgif HTML responses

ezgif has no API, so results are located by splitting the returned markup
on literal fragments. Callers only depend on these two functions.
"""
import logging
from typing import List

from .errors import ExtractionFailed

logger = logging.getLogger(__name__)

FRAMES_START = "(drag and drop frames to change order)"
FRAMES_END = '<p class="options"><strong>Toggle a range of frames:</strong>'
FRAME_SEPARATOR = '<span class="frame-tools">'
FRAME_ID_START = 'value="'
FRAME_ID_END = '" name="files[]"'


def _between(text: str, start: str, end: str) -> str:
    """Text after the first `start` and before the next `end`"""
    _, found, remainder = text.partition(start)
    if not found:
        raise ExtractionFailed(f"Start delimiter {start!r} not found in response.")
    match, found, _ = remainder.partition(end)
    if not found:
        raise ExtractionFailed(f"End delimiter {end!r} not found in response.")
    return match


def extract_image_url(body: str, start: str, end: str) -> str:
    """
    Pull the result URL out of an ajax response

    Args:
        body: Response text
        start: Literal marker right before the URL
        end: Literal marker right after the URL

    Returns:
        Absolute URL; scheme-relative results get an https: prefix

    Raises:
        ExtractionFailed: If a delimiter is missing or the match is empty
    """
    url = _between(body or "", start, end).strip()
    if not url:
        raise ExtractionFailed()
    if url.startswith("//"):
        url = f"https:{url}"
    logger.debug(f"[ezgif extractor] Extracted {url}")
    return url


def extract_frame_ids(body: str) -> List[str]:
    """
    Read the server-side frame ids from a maker job page, in page order

    The page lists one `<span class="frame-tools">` block after every frame,
    so the chunk following the last separator is not a frame.
    """
    region = _between(body or "", FRAMES_START, FRAMES_END)
    chunks = region.split(FRAME_SEPARATOR)[:-1]
    if not chunks:
        raise ExtractionFailed("No frames found on the job page.")

    frame_ids = []
    for chunk in chunks:
        frame_id = _between(chunk, FRAME_ID_START, FRAME_ID_END)
        if not frame_id:
            raise ExtractionFailed("Empty frame id on the job page.")
        frame_ids.append(frame_id)
    return frame_ids
