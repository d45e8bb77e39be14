# photo_api/core/json.py
from typing import Any, Mapping
import json
from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """
    JSON en UTF-8 sin escapes ASCII; pasa antes por jsonable_encoder
    (datetime de created_at/updated_at, etc.).
    """
    media_type = "application/json; charset=utf-8"

    def render(self, content: Any) -> bytes:
        return json.dumps(
            jsonable_encoder(content),
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")


def error_response(
    message: Any,
    status_code: int,
    headers: Mapping[str, str] | None = None,
) -> UTF8JSONResponse:
    # única forma de error que ve el cliente: {"error": "..."}
    return UTF8JSONResponse({"error": message}, status_code=status_code, headers=headers)
