# mobile_backend/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import config, echo, errors

app = FastAPI(title="Mobile Backend")

# Ionic and React Native web builds call us from a dev server origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
    max_age=86400,
)
errors.register(app)

# Include routers
app.include_router(echo.router)
