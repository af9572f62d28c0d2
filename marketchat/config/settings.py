"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    APP_ENV = os.getenv("APP_ENV", "development")

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8080"))
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Postgresql Database settings (read by Prisma from the environment)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Seller reputation ("temperature")
    REPUTATION_BASELINE: float = float(os.getenv("REPUTATION_BASELINE", "36.5"))
    REPUTATION_CEILING: float = float(os.getenv("REPUTATION_CEILING", "99.9"))
    REPUTATION_DELTA: float = float(os.getenv("REPUTATION_DELTA", "0.1"))

    # Chat rooms
    # How many times get-or-create re-reads after losing an insert race
    ROOM_CREATE_MAX_ATTEMPTS: int = int(os.getenv("ROOM_CREATE_MAX_ATTEMPTS", "3"))
