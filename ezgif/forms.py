"""
Request builders: turn validated requests into upload forms

Nothing in this module touches the network, so every validation error is
raised before the first HTTP call of an operation.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from .errors import (
    MissingEitherParam,
    MissingFilename,
    MissingFrameData,
    MissingFrameName,
    MissingPayload,
    MissingRequiredParam,
    RequestValidationError,
    UnknownOperation,
)
from .models import (
    PAYLOAD_FIELDS,
    ConversionRequest,
    Number,
    OperationSpec,
    OverlayRequest,
    RenderRequest,
    UploadForm,
)
from .registry import lookup

logger = logging.getLogger(__name__)

FILE_FIELD = "new-image"
URL_FIELD = "new-image-url"
OVERLAY_FIELD = "new-overlay"


def payload_files(
    file: Optional[bytes],
    url: Optional[str],
    filename: Optional[str],
) -> List[tuple]:
    """
    Build the multipart part carrying the uploaded file or its URL

    A file takes precedence over a URL when both are given. The URL is sent
    as a plain (filename-less) multipart part so the body stays multipart.

    Raises:
        MissingFilename: If a file is given without a filename
        MissingPayload: If neither file nor url is given
    """
    if file:
        if not filename:
            raise MissingFilename()
        return [(FILE_FIELD, (filename, file))]
    if url:
        return [(URL_FIELD, (None, url.encode()))]
    raise MissingPayload()


def translate_validation_error(exc: ValidationError) -> RequestValidationError:
    """
    Map a pydantic error raised while building a request model to the
    matching request error

    Only the first reported error is used; its location names the field.
    """
    error = exc.errors()[0]
    loc = error["loc"]
    field = loc[0] if loc else None

    if field in ("operation", "target"):
        return UnknownOperation(error.get("input"))
    if field == "files":
        if len(loc) < 2 or not isinstance(loc[1], int):
            return MissingPayload("At least one frame is required to render.")
        if len(loc) > 2 and loc[2] == "name":
            return MissingFrameName(loc[1])
        if len(loc) == 2 or loc[2] == "data":
            return MissingFrameData(loc[1])
    if field == "overlay":
        if len(loc) > 1 and loc[1] == "filename":
            return MissingFilename()
        return MissingPayload("Overlay image file is required.")
    if field in ("file", "url"):
        return MissingPayload()
    if field == "filename":
        return MissingFilename()
    return RequestValidationError(f"Invalid value for {'.'.join(str(part) for part in loc)}: {error['msg']}")


def strip_payload_fields(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a fresh copy of params without the payload-selection keys"""
    return {k: v for k, v in params.items() if k not in PAYLOAD_FIELDS}


def validate_params(spec: OperationSpec, params: Mapping[str, Any]) -> None:
    """
    Check caller params against the operation's required/either names

    Raises:
        MissingRequiredParam: Naming the first required key not supplied
        MissingEitherParam: If none of the either-params is supplied
    """
    supplied = set(params)
    for param in spec.required_params:
        if param not in supplied:
            raise MissingRequiredParam(param)
    if spec.either_params and not supplied.intersection(spec.either_params):
        raise MissingEitherParam(spec.either_params)


def build_upload_form(request: ConversionRequest, spec: Optional[OperationSpec] = None) -> UploadForm:
    """
    Build the upload form for a conversion

    Args:
        request: The conversion request
        spec: The already resolved spec of request.operation, if any

    Returns:
        UploadForm with the payload part and the reduced caller params
    """
    spec = spec or lookup(request.operation)
    files = payload_files(request.file, request.url, request.filename)
    params = strip_payload_fields(request.params)
    validate_params(spec, params)

    logger.debug(f"[ezgif forms] {spec.id.value} upload form: parts={[f[0] for f in files]}, params={sorted(params)}")
    return UploadForm(files=files, params=params)


def frame_delays(request: RenderRequest) -> List[Number]:
    """Per-frame delays in submitted order, defaulting to the global delay"""
    return [
        frame.delay if frame.delay is not None else request.delay
        for frame in request.files
    ]


def build_render_form(request: RenderRequest) -> UploadForm:
    """
    Build the multi-frame upload for a render

    The returned params hold everything the job page needs except the job
    id and the server-assigned frame ids.

    Raises:
        MissingPayload: If no frames are given
        MissingFrameData: If a frame has no data
        MissingFrameName: If a frame has no name
    """
    if not request.files:
        raise MissingPayload("At least one frame is required to render.")

    files = []
    for index, frame in enumerate(request.files):
        if not frame.data:
            raise MissingFrameData(index)
        if not frame.name:
            raise MissingFrameName(index)
        files.append(("files[]", (frame.name, frame.data)))

    params = {
        "delay": request.delay,
        "dfrom": request.dfrom,
        "dto": request.dto,
        "fader-delay": request.fader_delay,
        "fader-frames": request.fader_frames,
        "loop": request.loop,
        "delays[]": frame_delays(request),
        **strip_payload_fields(request.params),
    }
    return UploadForm(
        data={"msort": "1", "upload": "Upload and make a GIF!"},
        files=files,
        params=params,
    )


def build_overlay_form(request: OverlayRequest) -> UploadForm:
    """Validate both images of an overlay and build the base image upload"""
    files = payload_files(request.file, request.url, request.filename)

    overlay = request.overlay
    if not overlay.file:
        raise MissingPayload("Overlay image file is required.")
    if not overlay.filename:
        raise MissingFilename()

    return UploadForm(
        files=files,
        params={"posX": request.x or 0, "posY": request.y or 0},
    )


def build_overlay_image_form(request: OverlayRequest) -> UploadForm:
    """Second upload of an overlay: the image placed on top of the base"""
    return UploadForm(
        data={"overlay": "Upload image!"},
        files=[(OVERLAY_FIELD, (request.overlay.filename, request.overlay.file))],
    )
