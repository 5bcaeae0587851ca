from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from localpros.core.config import settings
from localpros.core.exceptions import AppError, BadRequest
from localpros.core.logging import get_logger
from localpros.db.base import database
from localpros.api.routes import auth
from localpros.api.routes import admin as admin_router
from localpros.api.routes import contacts as contacts_router
from localpros.api.routes import data as data_router
from localpros.api.routes import my_provider as my_provider_router
from localpros.api.routes import providers as providers_router
from localpros.api.routes import review as review_router

LOGGER = get_logger(__name__, level=settings.log_level)

app = FastAPI(title=settings.app_name, version=settings.app_version)


@app.on_event("startup")
def startup():
    database.create_all()
    LOGGER.info(f"{settings.app_name} started (storage available: {database.available})")


@app.on_event("shutdown")
def shutdown():
    database.dispose()


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.original_error is not None:
        LOGGER.warning(f"{request.method} {request.url.path} -> {exc.code}: {exc.original_error}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{location}: {first.get('msg')}" if location else first.get("msg", "Invalid input")
    error = BadRequest(message)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.get("/")
def root():
    return {"message": "Local service provider directory API running"}


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/ready")
def ready():
    return {"ready": database.ping()}


app.include_router(auth.router)
app.include_router(providers_router.router)
app.include_router(my_provider_router.router)
app.include_router(review_router.router)
app.include_router(contacts_router.router)
app.include_router(data_router.router)
app.include_router(admin_router.router)


def run():
    import uvicorn

    uvicorn.run(
        "localpros.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
