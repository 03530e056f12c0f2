# kitchen/core/errors.py

from fastapi import status


class KitchenError(Exception):
    """Base error carrying the HTTP status it should be rendered with."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str, payload: dict | None = None):
        super().__init__(detail)
        self.detail = detail
        self.payload = payload or {}

    def to_dict(self) -> dict:
        return {"detail": self.detail, **self.payload}


class ValidationError(KitchenError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(KitchenError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(KitchenError):
    status_code = status.HTTP_409_CONFLICT


class UpstreamUnavailable(KitchenError):
    status_code = status.HTTP_502_BAD_GATEWAY


class InternalError(KitchenError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
