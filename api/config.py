"""
Configuration for the Blog Posts API.

Values come from environment variables so the same code runs against the
runtime database and the test database.
"""
import os
import logging

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

MONGO_URL = os.getenv("MONGO_URL", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "blog_app")

PORT = int(os.getenv("PORT", 8080))
