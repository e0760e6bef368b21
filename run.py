#!/usr/bin/env python3
"""
Run script for the visitor check-in server
"""

import uvicorn

from visitor_checkin.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "visitor_checkin.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
