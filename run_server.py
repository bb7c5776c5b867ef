#!/usr/bin/env python3
"""
Start the Blog Posts API with uvicorn.

The MongoDB connection string and port come from the environment
(MONGO_URL, DB_NAME, PORT).
"""
import uvicorn

from api import config


def main():
    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=config.PORT,
        reload=False,
        log_level=config.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
