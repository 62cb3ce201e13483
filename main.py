import logging
from contextlib import AsyncExitStack

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.connections import mongo_lifespan
from app.api.user import router as user_router
from app.api.role import router as role_router
from app.api.system import router as system_router
from app.utils.base import ServiceError
from app.utils.config import settings, configure_logging, get_role_catalog


logger = logging.getLogger(__name__)


async def combined_lifespan(app: FastAPI):
    configure_logging()
    # Fail fast on a broken catalog rather than on the first request
    get_role_catalog()
    async with AsyncExitStack() as stack:
        await stack.enter_async_context(mongo_lifespan(app))

        yield


app = FastAPI(title="Mission Roles (Mongo)", version="0.1.0", lifespan=combined_lifespan)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_output(include_detail=settings.debug))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Rejected request to %s: %s", request.url.path, exc.errors())
    content = {"error": "invalid_input", "message": "Invalid request parameters"}
    if settings.debug:
        content["detail"] = str(exc.errors())
    return JSONResponse(status_code=400, content=content)


app.include_router(user_router, prefix="/api/users")
app.include_router(role_router, prefix="/api/roles")
app.include_router(system_router, prefix="/api/system")
