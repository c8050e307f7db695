"""Run FastAPI server for Country Service."""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

import uvicorn

from src.utils.config_loader import load_service_settings

if __name__ == "__main__":
    settings = load_service_settings()
    uvicorn.run(
        "src.api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
