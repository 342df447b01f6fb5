# employee_directory/main.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from employee_directory.core.config import get_settings, Settings
from employee_directory.core.logger import configure_logging, get_logger
from employee_directory.core.security import install_standard_headers
from employee_directory.db import build_engine
from employee_directory.errors import DuplicateKey, StorageError, UnsupportedMediaType, ValidationError
from employee_directory.routers import employees, pages, system
from employee_directory.store import EmployeeStore

logger = get_logger(__name__)

tags_metadata = [
    {"name": "System", "description": "Salud del servicio y metadatos."},
    {"name": "Employees", "description": "Alta, listado y borrado masivo de empleados."},
]

def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        return JSONResponse({"errors": exc.messages}, status_code=exc.status_code)

    @app.exception_handler(DuplicateKey)
    async def duplicate_key(request: Request, exc: DuplicateKey):
        return JSONResponse({"message": exc.message}, status_code=exc.status_code)

    @app.exception_handler(UnsupportedMediaType)
    async def unsupported_media_type(request: Request, exc: UnsupportedMediaType):
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(StorageError)
    async def storage_error(request: Request, exc: StorageError):
        # la causa se queda en el log; al cliente solo el mensaje saneado
        logger.error("storage_error: %s", exc.message, exc_info=exc.cause,
                     extra={"path": request.url.path, "method": request.method})
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)
    if engine is None:
        engine = build_engine(settings.sqlalchemy_url)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=settings.APP_DESCRIPTION,
        openapi_tags=tags_metadata,
    )
    app.state.settings = settings
    app.state.store = EmployeeStore(engine)
    app.dependency_overrides[get_settings] = lambda: settings

    _register_error_handlers(app)
    install_standard_headers(app, settings)

    app.include_router(pages.router)
    app.include_router(system.router, prefix=settings.API_PREFIX)
    app.include_router(employees.router, prefix=settings.API_PREFIX)
    for r in app.routes:
        path = getattr(r, "path", None)
        if path is None:
            continue
        logger.debug("route %s %s", path, sorted(getattr(r, "methods", None) or []))
    return app

app = create_app()
