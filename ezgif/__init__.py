"""
Async client for the ezgif.com image and animation tools
"""
import logging

from .client import EzgifClient
from .errors import (
    EzgifError,
    ExtractionFailed,
    MissingEitherParam,
    MissingFilename,
    MissingFrameData,
    MissingFrameName,
    MissingPayload,
    MissingRequiredParam,
    RedirectionFailed,
    RequestValidationError,
    UnknownOperation,
    UpstreamHttpError,
    UpstreamUnknownError,
)
from .models import FrameFile, Operation, OperationSpec, OverlayImage, RenderTarget
from .registry import lookup
from .settings import EZGIF_LOG_LEVEL
from .shortcuts import (
    convert,
    gif2mp4,
    gif2webp,
    img2webp,
    list_operations,
    overlay,
    render,
    vid2gif,
    vid2webp,
    webp2img,
    webp2mp4,
)

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
if EZGIF_LOG_LEVEL is not None:
    logger.setLevel(EZGIF_LOG_LEVEL)

__all__ = [
    'EzgifClient',
    'Operation',
    'OperationSpec',
    'RenderTarget',
    'FrameFile',
    'OverlayImage',
    'lookup',
    'list_operations',
    'convert',
    'overlay',
    'render',
    'webp2mp4',
    'webp2img',
    'img2webp',
    'vid2webp',
    'vid2gif',
    'gif2mp4',
    'gif2webp',
    'EzgifError',
    'RequestValidationError',
    'UnknownOperation',
    'MissingPayload',
    'MissingFilename',
    'MissingRequiredParam',
    'MissingEitherParam',
    'MissingFrameData',
    'MissingFrameName',
    'RedirectionFailed',
    'ExtractionFailed',
    'UpstreamHttpError',
    'UpstreamUnknownError',
]
