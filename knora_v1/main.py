import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from knora_v1.controllers.ontology_controller import router as ontology_router
from knora_v1.controllers.resource_controller import router as resource_router
from knora_v1.models.basic_components import ApiStatusCode

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

# HTTP status -> `status` field of the error body
API_STATUS_FOR_HTTP = {
    status.HTTP_400_BAD_REQUEST: ApiStatusCode.INVALID_REQUEST_TYPE,
    status.HTTP_404_NOT_FOUND: ApiStatusCode.NO_NODES_FOUND,
}

app = FastAPI(title="Knora API v1 fixture server")


def error_response(status_code: int, message: str) -> JSONResponse:
    api_status = API_STATUS_FOR_HTTP.get(status_code, ApiStatusCode.INTERNAL_SALSAH_ERROR)
    return JSONResponse(status_code=status_code, content={"status": int(api_status), "error": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc.errors()))


app.include_router(resource_router, prefix="/v1")
app.include_router(ontology_router, prefix="/v1")
