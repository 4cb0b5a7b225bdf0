"""Run the StoryForge API with uvicorn."""
from pathlib import Path

import uvicorn

from storyforge.config import get_settings


def main() -> None:
    settings = get_settings()
    package_dir = Path(__file__).resolve().parent

    uvicorn.run(
        "storyforge.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        reload=settings.backend_reload,
        reload_dirs=[str(package_dir)] if settings.backend_reload else None,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
