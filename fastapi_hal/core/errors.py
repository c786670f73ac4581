"""Builder errors and vnd.error document templates."""

from typing import Any

from fastapi_hal.schemas.resource import VndError, VndErrorDocument


class BuilderStateError(RuntimeError):
    """Raised when a finished builder is configured or built again."""

    def __init__(self, message: str = "Build process is complete - no further changes can be made") -> None:
        super().__init__(message)


class HALErrorBuilder:
    """Build vnd.error objects and error documents."""

    def error_object(
        self,
        *,
        message: str | None = None,
        logref: str | None = None,
        path: str | None = None,
    ) -> dict[str, Any]:
        """Return a vnd.error object."""
        if not message:
            raise ValueError("Error object must include a message.")
        return VndError(message=message, logref=logref, path=path).model_dump(exclude_none=True)

    def error_document(
        self, errors: list[dict[str, Any]], *, links: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Return a vnd.error document embedding the given errors."""
        document = VndErrorDocument(
            total=len(errors),
            embedded={"errors": [VndError(**error) for error in errors]},
            links=links,
        )
        return document.model_dump(by_alias=True, exclude_none=True)
