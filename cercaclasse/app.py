"""FastAPI app factory."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cercaclasse.config import settings
from cercaclasse.exceptions import CercaClasseError
from cercaclasse.log import logger
from cercaclasse.routes import router


async def handle_cercaclasse_error(request: Request, exc: CercaClasseError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": exc.error_code, "message": exc.message},
    )


def create_app() -> FastAPI:
    app = FastAPI(title=settings.api_title, version=settings.api_version)
    app.add_exception_handler(CercaClasseError, handle_cercaclasse_error)
    app.include_router(router)
    return app


app = create_app()
