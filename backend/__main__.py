"""Run the API server: python -m backend"""

import uvicorn

from backend.config import settings
from backend.main import app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
