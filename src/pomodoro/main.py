# main.py
from dotenv import load_dotenv
load_dotenv()
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
import logging

from pomodoro.core.config import get_settings
from pomodoro.core.database import init_db
from pomodoro.api import (
    category_router,
    task_router,
    schedule_router,
    timer_settings_router,
    health_api_router,
)

settings = get_settings()

APP_LOGGERS = ["CORE_CONFIG", "CORE_DATABASE", "CRUD_SERVICE", "HEALTH_API_LOGGER"]


def configure_logging() -> None:
    """Apply the configured level to application loggers and reuse uvicorn's handler."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    uvicorn_logger = logging.getLogger("uvicorn")
    for logger_name in APP_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        if not logger.handlers and uvicorn_logger.handlers:
            logger.addHandler(uvicorn_logger.handlers[0])


app = FastAPI(title=settings.app_name, description="Time tracker", debug=settings.debug)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_headers=["*"],
    allow_methods=["*"],
)


@app.on_event("startup")
def on_startup():
    configure_logging()
    init_db()


app.include_router(category_router, prefix="/api")
app.include_router(task_router, prefix="/api")
app.include_router(schedule_router, prefix="/api")
app.include_router(timer_settings_router, prefix="/api")
app.include_router(health_api_router, prefix="/api")


@app.get("/")
async def root():
    return {"message": "Welcome to the Pomodoro API"}


if __name__ == "__main__":
    if settings.environment.lower() == "production":
        # Production: Multiple workers, no reload
        uvicorn.run("pomodoro.main:app", host="0.0.0.0", port=8000, workers=4)
    else:
        # Development: Single worker with hot reload
        uvicorn.run("pomodoro.main:app", host="0.0.0.0", port=8000, reload=True)
