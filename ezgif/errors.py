"""
Exceptions raised by the ezgif client
"""
from typing import Optional, Sequence

FALLBACK_ERROR_BODY = "Try again. If it continues, report to the creator."


class EzgifError(Exception):
    """Base class for every error raised by this package"""


class RequestValidationError(EzgifError, ValueError):
    """Raised before any network call when a request is malformed"""


class UnknownOperation(RequestValidationError):
    def __init__(self, operation_id):
        self.operation_id = operation_id
        super().__init__(f'Invalid operation "{operation_id}"')


class MissingPayload(RequestValidationError):
    def __init__(self, message: str = "Either file or url field is required."):
        super().__init__(message)


class MissingFilename(RequestValidationError):
    def __init__(self, message: str = "Filename must be provided to upload files (with extension)"):
        super().__init__(message)


class MissingRequiredParam(RequestValidationError):
    def __init__(self, param: str):
        self.param = param
        super().__init__(f'"{param}" is a required param.')


class MissingEitherParam(RequestValidationError):
    def __init__(self, params: Sequence[str]):
        self.params = tuple(params)
        super().__init__(
            f"Either one of these params has to be provided: {', '.join(self.params)}"
        )


class MissingFrameData(RequestValidationError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(f"File buffer not provided for files[{index}]")


class MissingFrameName(RequestValidationError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(f"File name not provided for files[{index}]")


class RedirectionFailed(EzgifError):
    def __init__(self, url: Optional[str] = None):
        self.url = url
        super().__init__(f"Unknown error occurred during redirection from {url}.")


class ExtractionFailed(EzgifError):
    def __init__(self, message: str = "Failed to extract image URL."):
        super().__init__(message)


class UpstreamHttpError(EzgifError):
    """The upstream site answered with an HTTP error status"""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"Upstream returned HTTP {status}: {body}")

    def to_dict(self):
        return {
            "statusCode": self.status,
            "data": self.body,
        }


class UpstreamUnknownError(EzgifError):
    """The request failed without any response (network level)"""

    def __init__(self, message: str = "Oops, something unknown happened! :("):
        super().__init__(message)
