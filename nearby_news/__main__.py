# __main__.py

"""
Run the nearby news service with uvicorn: ``python -m nearby_news``.
"""

import uvicorn

from .core.config import settings


def main():
    uvicorn.run(
        "nearby_news.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
