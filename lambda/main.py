from fastapi import FastAPI, Request, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from mangum import Mangum
import httpx
import time
from models import *
from config import Settings, get_settings, load_environment, parse_cors_origins
import gemini_service
from gemini_service import TranslationError, MissingWordError
from utils import logging

# FASTAPI app and AWS Lambda handler
app = FastAPI(title="German Translation Proxy")
handler = Mangum(app)

# Origins only; the credential is resolved on first request
load_environment()
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(parse_cors_origins()),
    allow_methods=["*"],
    allow_headers=["*"],
)

# One client per request, closed once the response is sent
async def get_http_client():
    async with httpx.AsyncClient() as client:
        yield client

@app.middleware("http")
async def log_requests(request: Request, call_next):
    # Generate a request ID for tracking
    logging.set_request_id()

    start_time = time.time()
    logging.info(f"Incoming request: {request.method} {request.url.path}")

    try:
        response = await call_next(request)

        process_time = time.time() - start_time
        logging.info(f"Completed request: {request.method} {request.url.path} with {response.status_code} in {process_time:.2f} seconds")

        return response
    except Exception as exc:
        # Logged here while the request ID is still set
        logging.exception(f"Unhandled exception at {request.method} {request.url.path} - {str(exc)}")
        raise
    finally:
        logging.clear_request_id()

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )

@app.exception_handler(TranslationError)
async def translation_exception_handler(request: Request, exc: TranslationError):
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.content(),
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logging.warning(f"Rejected request body at {request.url.path}: {exc.errors()}")
    error = MissingWordError()
    return JSONResponse(
        status_code=error.status_code,
        content=error.content(),
    )

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
    )

@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse()

@app.post(
    "/translate",
    response_model=TranslationResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def translate(
    req: TranslationRequest,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    return await gemini_service.translate_word(req.germanWord, settings, client)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
