"""
Production application instance.

    uvicorn tracker.main:app --host 0.0.0.0 --port 5001
"""

from tracker.config.logging_config import setup_logging
from tracker.config.settings import Config
from tracker.fastapi_app import create_fastapi_app
from tracker.setup.ioc.container import create_container

setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

# Create container at module level (before app starts)
# Dishka adds middleware, which must happen before the app starts
container = create_container()

app = create_fastapi_app(container)
