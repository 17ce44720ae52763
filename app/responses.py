## JSON responses carrying the browser CORS headers
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def cors_json(content: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(jsonable_encoder(content), status_code=status_code, headers=CORS_HEADERS)


def error_envelope(message: str, status_code: int = 500) -> JSONResponse:
    return cors_json({"error": message}, status_code=status_code)
