from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

"""
Pydantic models for ezgif requests and the operation registry
"""

PAYLOAD_FIELDS = ("type", "file", "filename", "url")


def _as_bytes(value: Any) -> Any:
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    return value


# Any bytes-like buffer is accepted and stored as bytes
Buffer = Annotated[bytes, BeforeValidator(_as_bytes)]

# Delays (hundredths of a second) and offsets may be fractional
Number = Union[int, float]


class Operation(str, Enum):
    VIDEO_GIF = "video-gif"
    VIDEO_WEBP = "video-webp"
    GIF_MP4 = "gif-mp4"
    GIF_WEBP = "gif-webp"
    GIF_APNG = "gif-apng"
    APNG_GIF = "apng-gif"
    WEBP_GIF = "webp-gif"
    WEBP_MP4 = "webp-mp4"
    WEBP_PNG = "webp-png"
    WEBP_JPG = "webp-jpg"
    PNG_WEBP = "png-webp"
    JPG_WEBP = "jpg-webp"
    RESIZE = "resize"
    CROP = "crop"
    ROTATE = "rotate"
    SPEED = "speed"
    REVERSE = "reverse"
    OPTIMIZE = "optimize"


class RenderTarget(str, Enum):
    GIF = "gif"
    WEBP = "webp"
    APNG = "apng"


class Delimiters(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: str
    end: str


class OperationSpec(BaseModel):
    """Static description of one upstream workflow"""
    model_config = ConfigDict(frozen=True)

    id: Operation
    endpoint_url: str
    required_params: Tuple[str, ...] = ()
    either_params: Tuple[str, ...] = ()
    default_params: Dict[str, Any] = {}
    delimiters: Delimiters


class ConversionRequest(BaseModel):
    operation: Operation
    file: Optional[Buffer] = None
    url: Optional[str] = None
    filename: Optional[str] = None
    params: Dict[str, Any] = {}

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> "ConversionRequest":
        """Build a request from a flat {type, file, filename, url, ...} mapping.

        The mapping itself is left untouched.
        """
        return cls(
            operation=fields.get("type"),
            file=fields.get("file"),
            url=fields.get("url"),
            filename=fields.get("filename"),
            params={k: v for k, v in fields.items() if k not in PAYLOAD_FIELDS},
        )


class FrameFile(BaseModel):
    """One frame of a render request"""
    data: Optional[Buffer] = None
    name: Optional[str] = None
    delay: Optional[Number] = None  # hundredths of a second, falls back to the global delay


class RenderRequest(BaseModel):
    target: RenderTarget = RenderTarget.GIF
    files: List[FrameFile]
    delay: Number = 20
    dfrom: int = 1
    dto: int = 5
    fader_delay: int = 6
    fader_frames: int = 10
    loop: int = 0
    params: Dict[str, Any] = {}


class OverlayImage(BaseModel):
    file: Optional[Buffer] = None
    filename: Optional[str] = None


class OverlayRequest(BaseModel):
    file: Optional[Buffer] = None
    url: Optional[str] = None
    filename: Optional[str] = None
    overlay: OverlayImage
    x: Optional[Number] = 0
    y: Optional[Number] = 0


class UploadForm(BaseModel):
    """Multipart body for an upload plus the parameters forwarded to the job page"""
    data: Dict[str, str] = {}
    files: List[Tuple[str, Tuple[Optional[str], bytes]]] = Field(default_factory=list)
    params: Dict[str, Any] = {}
