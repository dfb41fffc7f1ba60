#!/usr/bin/env python3
"""Run script for taskscore."""

import uvicorn

from taskscore.config import configure_logging

if __name__ == "__main__":
    configure_logging()
    uvicorn.run(
        "taskscore.api.app:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
