from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import os
import uvicorn

from . import routers
from .database import init_db, check_db_connection
from .schemas.common import ResponseFactory
from .utils.constants import ErrorCodes

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Task Tracker API",
    description="Household task tracking with points, goals and monthly reports",
    version="1.0.0",
)

CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
).split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in CORS_ORIGINS if origin.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed input is a 400 naming the offending fields"""
    fields = {
        ".".join(str(part) for part in error["loc"] if part != "body"): error["msg"]
        for error in exc.errors()
    }
    logger.warning(f"Request validation failed on {request.url.path}: {fields}")
    response = ResponseFactory.error(
        message=f"Invalid input: {', '.join(fields) or 'request'}",
        error_code=ErrorCodes.VALIDATION_ERROR,
        details=fields,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=response.model_dump(mode="json"),
    )


@app.on_event("startup")
async def startup_event():
    """Create tables when the app starts"""
    print("🚀 Starting Task Tracker API...")
    init_db()


@app.on_event("shutdown")
async def shutdown_event():
    print("⏹️ Stopping Task Tracker API...")


app.include_router(routers.auth.router, prefix="/api/auth", tags=["authentication"])
app.include_router(routers.tenants.router, prefix="/api/tenants", tags=["tenants"])
app.include_router(routers.people.router, prefix="/api/people", tags=["people"])
app.include_router(routers.tasks.router, prefix="/api/tasks", tags=["tasks"])
app.include_router(routers.reports.router, prefix="/api/reports", tags=["reports"])
app.include_router(routers.admin.router, prefix="/api/admin", tags=["admin"])


@app.get("/")
async def root():
    return {"message": "Welcome to Task Tracker API", "status": "running"}


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": "tasktracker-api",
        "version": "1.0.0",
        "database": check_db_connection(),
    }


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
