"""Run the API with uvicorn: python -m football_agent"""

import uvicorn

from football_agent.api.app import app
from football_agent.config.settings import settings
from football_agent.core.logging import get_logger

logger = get_logger(__name__)

if __name__ == "__main__":
    logger.info(f"Starting Football Intelligence Agent on {settings.server.host}:{settings.server.port}")
    uvicorn.run(app, host=settings.server.host, port=settings.server.port)
