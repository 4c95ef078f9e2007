# main.py
from dotenv import load_dotenv
load_dotenv()
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
import logging

from taskboard.core.config import get_settings
from taskboard.core.database import init_db
from taskboard.api.errors import request_validation_handler
from taskboard.api import (
    users_api_router,
    tasks_api_router,
    dashboard_api_router,
    health_api_router,
    rpc_api_router,
)

APP_LOGGERS = [
    "CORE_DATABASE",
    "USER_SERVICE",
    "TASK_SERVICE",
    "DASHBOARD_SERVICE",
    "RPC_API_LOGGER",
    "HEALTH_API_LOGGER",
    "API_ERRORS",
    "UNIT_OF_WORK",
]

settings = get_settings()

app = FastAPI(title=settings.app_name, debug=settings.debug)
app.add_exception_handler(RequestValidationError, request_validation_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    # Route application loggers through uvicorn's handler
    for logger_name in APP_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(settings.log_level.upper())
        if not logger.handlers:
            uvicorn_logger = logging.getLogger("uvicorn")
            if uvicorn_logger.handlers:
                logger.addHandler(uvicorn_logger.handlers[0])

    init_db()


app.include_router(users_api_router, prefix="/api")
app.include_router(tasks_api_router, prefix="/api")
app.include_router(dashboard_api_router, prefix="/api")
app.include_router(health_api_router, prefix="/api")
app.include_router(rpc_api_router, prefix="/api")


@app.get("/")
def root():
    return {"message": f"Welcome to the {settings.app_name} API"}


def run():
    """Console entry point."""
    if settings.environment.lower() == "production":
        # Production: Multiple workers, no reload
        uvicorn.run("taskboard.main:app", host=settings.api_host, port=settings.api_port, workers=4)
    else:
        # Development: Single worker with hot reload
        uvicorn.run("taskboard.main:app", host=settings.api_host, port=settings.api_port, reload=True)


if __name__ == "__main__":
    run()
