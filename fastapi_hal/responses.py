"""FastAPI response classes for HAL and vnd.error documents."""

from typing import Any, Mapping

from fastapi.encoders import jsonable_encoder
from starlette.background import BackgroundTask
from starlette.responses import JSONResponse

from fastapi_hal.config import get_settings
from fastapi_hal.core.representation import Representation


class HALResponse(JSONResponse):
    """Render a Representation (or a plain dict) as ``application/hal+json``.

    The media type is read from settings per response.
    """

    media_type = "application/hal+json"

    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        media_type: str | None = None,
        background: BackgroundTask | None = None,
    ) -> None:
        super().__init__(
            content,
            status_code=status_code,
            headers=headers,
            media_type=media_type or get_settings().media_type,
            background=background,
        )

    def render(self, content: Any) -> bytes:
        if isinstance(content, Representation):
            content = content.to_dict()
        return super().render(jsonable_encoder(content))


class VndErrorResponse(JSONResponse):
    """Render a vnd.error document."""

    media_type = "application/vnd.error+json"

    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        media_type: str | None = None,
        background: BackgroundTask | None = None,
    ) -> None:
        super().__init__(
            content,
            status_code=status_code,
            headers=headers,
            media_type=media_type or get_settings().error_media_type,
            background=background,
        )
