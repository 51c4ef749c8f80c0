"""
Main application entry point
"""

import uvicorn
from taskboard.config.settings import settings
from taskboard.utils.logger import logger


def main():
    """Run the web dashboard"""
    logger.info(f"Starting task dashboard on port {settings.WEB_PORT}")
    uvicorn.run("taskboard.web.main:app", host="0.0.0.0", port=settings.WEB_PORT)


if __name__ == "__main__":
    main()
