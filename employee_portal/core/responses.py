from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_resp(status_code: int = 200, **payload: Any) -> JSONResponse:
    """
    Standardized success envelope: ``{"success": true, ...payload}``.
    """
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"success": True, **payload}),
    )


def error_resp(message: str, status_code: int = 500) -> JSONResponse:
    """
    Standardized error envelope: ``{"success": false, "message": ...}``.
    """
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )
