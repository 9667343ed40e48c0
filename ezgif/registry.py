"""
Static table of ezgif operations and their upstream endpoints
"""
import logging
from types import MappingProxyType
from typing import List, Mapping, Union

from .errors import UnknownOperation
from .models import Delimiters, Operation, OperationSpec, RenderTarget
from .settings import EZGIF_BASE_URL

logger = logging.getLogger(__name__)

# Output markers in the ajax result fragment
IMAGE_DELIMITERS = Delimiters(start='<img src="', end='" style="width')
VIDEO_DELIMITERS = Delimiters(start='<source src="', end='" type="video/mp4"')


def _spec(operation: Operation, path: str, delimiters: Delimiters = IMAGE_DELIMITERS, **kwargs) -> OperationSpec:
    return OperationSpec(
        id=operation,
        endpoint_url=f"{EZGIF_BASE_URL}/{path}",
        delimiters=delimiters,
        **kwargs
    )


OPERATIONS: Mapping[Operation, OperationSpec] = MappingProxyType({
    spec.id: spec for spec in (
        _spec(Operation.VIDEO_GIF, "video-to-gif",
              default_params={"start": 0, "end": 5, "size": "original", "fps": 10, "method": "ffmpeg"}),
        _spec(Operation.VIDEO_WEBP, "video-to-webp",
              default_params={"start": 0, "end": 5, "size": "original", "fps": 10, "loop": "on"}),
        _spec(Operation.GIF_MP4, "gif-to-mp4", VIDEO_DELIMITERS,
              default_params={"convert": "Convert GIF to MP4!"}),
        _spec(Operation.GIF_WEBP, "gif-to-webp"),
        _spec(Operation.GIF_APNG, "gif-to-apng"),
        _spec(Operation.APNG_GIF, "apng-to-gif"),
        _spec(Operation.WEBP_GIF, "webp-to-gif"),
        _spec(Operation.WEBP_MP4, "webp-to-mp4", VIDEO_DELIMITERS),
        _spec(Operation.WEBP_PNG, "webp-to-png"),
        _spec(Operation.WEBP_JPG, "webp-to-jpg"),
        _spec(Operation.PNG_WEBP, "png-to-webp", default_params={"percentage": 75}),
        _spec(Operation.JPG_WEBP, "jpg-to-webp", default_params={"percentage": 75}),
        _spec(Operation.RESIZE, "resize",
              either_params=("width", "height"),
              default_params={"method": "gifsicle", "ar": "no"}),
        _spec(Operation.CROP, "crop",
              required_params=("x1", "y1", "x2", "y2")),
        _spec(Operation.ROTATE, "rotate",
              required_params=("angle",)),
        _spec(Operation.SPEED, "speed",
              required_params=("percentage",)),
        _spec(Operation.REVERSE, "reverse"),
        _spec(Operation.OPTIMIZE, "optimize",
              default_params={"method": "lossy", "lossy": 35}),
    )
})

RENDER_ENDPOINTS: Mapping[RenderTarget, str] = MappingProxyType({
    RenderTarget.GIF: f"{EZGIF_BASE_URL}/maker",
    RenderTarget.WEBP: f"{EZGIF_BASE_URL}/webp-maker",
    RenderTarget.APNG: f"{EZGIF_BASE_URL}/apng-maker",
})

OVERLAY_ENDPOINT = f"{EZGIF_BASE_URL}/overlay"


def list_operations() -> List[str]:
    """Return every registered conversion id"""
    return [operation.value for operation in OPERATIONS]


def lookup(operation_id: Union[Operation, str, None]) -> OperationSpec:
    """
    Resolve a conversion id to its spec

    Args:
        operation_id: An Operation member or its string value

    Returns:
        The registered OperationSpec

    Raises:
        UnknownOperation: If the id is not registered
    """
    try:
        operation = Operation(operation_id)
    except ValueError:
        logger.debug(f"[ezgif registry] Unknown operation: {operation_id!r}")
        raise UnknownOperation(operation_id) from None
    return OPERATIONS[operation]


def lookup_render_target(target: Union[RenderTarget, str, None]) -> str:
    """Resolve a render target to its maker endpoint"""
    try:
        return RENDER_ENDPOINTS[RenderTarget(target)]
    except ValueError:
        raise UnknownOperation(target) from None
