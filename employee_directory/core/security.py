# employee_directory/core/security.py
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from employee_directory.core.config import Settings
from employee_directory.core.logger import get_logger

logger = get_logger(__name__)

ALLOWED_METHODS = "GET,POST,DELETE,OPTIONS"
ALLOWED_HEADERS = "Content-Type"

def apply_standard_headers(response: Response, settings: Settings) -> Response:
    """Security and CORS headers shared by every response."""
    response.headers["Content-Security-Policy"] = settings.CONTENT_SECURITY_POLICY
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["Referrer-Policy"] = "no-referrer"
    response.headers["Access-Control-Allow-Origin"] = settings.CORS_ALLOW_ORIGIN
    response.headers["Access-Control-Allow-Methods"] = ALLOWED_METHODS
    response.headers["Access-Control-Allow-Headers"] = ALLOWED_HEADERS
    return response

def install_standard_headers(app: FastAPI, settings: Settings) -> None:
    """
    Outermost boundary: answers preflight requests, turns any unhandled
    fault into a generic 500 and stamps the standard headers on everything.
    """
    @app.middleware("http")
    async def standard_headers(request: Request, call_next):
        if request.method == "OPTIONS":
            return apply_standard_headers(Response(status_code=status.HTTP_204_NO_CONTENT), settings)
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("unhandled_error", extra={"path": request.url.path, "method": request.method})
            response = JSONResponse(
                {"error": "Internal Server Error"},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return apply_standard_headers(response, settings)
