import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fitlog.api.auth import router as auth_router
from fitlog.api.users import router as users_router
from fitlog.api.logs import router as logs_router
from fitlog.api.photos import router as photos_router, files_router
from fitlog.api.foods import router as foods_router
from fitlog.api.push import router as push_router
from fitlog.api.reports import router as reports_router, calendar_router
from fitlog.db import Base, engine
from fitlog.models import daily_log, food, push_subscription, reminder_log, user, weekly_photo  # noqa: F401  (import ensures tables are registered)
from fitlog.core.config import settings

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(title="fitlog")

# Allow CORS for local frontend
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables on startup
Base.metadata.create_all(bind=engine)

# Ensure uploads directory exists
os.makedirs(settings.uploads_dir, exist_ok=True)

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(logs_router)
app.include_router(photos_router)
app.include_router(files_router)
app.include_router(foods_router)
app.include_router(push_router)
app.include_router(reports_router)
app.include_router(calendar_router)


@app.get("/")
def root():
    return {"message": "fitlog backend is running"}
