import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import JSONResponse
from starlette.responses import RedirectResponse

from latlng_geocoder.api.v1.api import api_router
from latlng_geocoder.core.config import get_settings
from latlng_geocoder.core.errors import GeocoderError, GeocoderErrorCode, ServerError

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    GeocoderErrorCode.NOT_INITIATED: status.HTTP_503_SERVICE_UNAVAILABLE,
    GeocoderErrorCode.INVALID_PARAMETERS: status.HTTP_400_BAD_REQUEST,
    GeocoderErrorCode.FETCHING: status.HTTP_502_BAD_GATEWAY,
    GeocoderErrorCode.PARSING: status.HTTP_502_BAD_GATEWAY,
    GeocoderErrorCode.SERVER: status.HTTP_502_BAD_GATEWAY,
}


def error_status(exc: GeocoderError) -> int:
    if isinstance(exc, ServerError) and exc.status == "ZERO_RESULTS":
        return status.HTTP_404_NOT_FOUND
    return ERROR_STATUS[exc.code]


def create_app() -> FastAPI:
    settings = get_settings()
    logger.info(f"App starting with root_path='{settings.root_path}'")

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        root_path=settings.root_path or "",
        docs_url=None,
        openapi_url=None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.exception_handler(GeocoderError)
    async def geocoder_error_handler(request: Request, exc: GeocoderError):
        content = exc.to_dict()
        if isinstance(exc, ServerError) and isinstance(exc.origin, dict):
            content["detail"] = exc.origin
        return JSONResponse(status_code=error_status(exc), content=content)

    # root_path(프록시 경로)를 고려해 문서 경로를 만듭니다.
    def prefixed(path: str) -> str:
        if app.root_path:
            return f"{app.root_path.rstrip('/')}{path}"
        return path

    @app.get("/openapi.json", include_in_schema=False)
    async def openapi_plain():
        return JSONResponse(app.openapi())

    @app.get("/docs", include_in_schema=False)
    async def docs_plain():
        return get_swagger_ui_html(openapi_url=prefixed("/openapi.json"), title=f"{app.title} - Docs")

    @app.get("/", include_in_schema=False)
    async def index_redirect():
        return RedirectResponse(url=prefixed("/docs"))

    return app


app = create_app()
