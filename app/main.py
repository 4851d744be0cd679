"""
Portfolio content gateway

Runs every content service (profile, projects, blog, search) in one process.
Each service can also be deployed on its own via apps.<service>.main:app.
"""
import logging
import os

from fastapi import FastAPI

from apps.shared.cors import setup_cors
from apps.shared.database import check_db_connection, utcnow
from apps.shared.errors import register_exception_handlers
from apps.profile.main import router as profile_router
from apps.projects.main import router as projects_router
from apps.blog.main import router as blog_router
from apps.search.main import router as search_router

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("portfolio-gateway")

app = FastAPI(
    title="Portfolio Content API",
    version="1.0.0",
    description="Profile, projects, blog posts and search for a personal portfolio",
)

setup_cors(app)
register_exception_handlers(app)

for router in (profile_router, projects_router, blog_router, search_router):
    app.include_router(router)


@app.get("/health")
def health():
    """Gateway health check - database connectivity plus server time."""
    db_connected = check_db_connection()
    return {
        "status": "ok" if db_connected else "degraded",
        "service": "gateway",
        "database": "connected" if db_connected else "disconnected",
        "timestamp": utcnow().isoformat(),
    }


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("SERVER_PORT", "8000"))
    logger.info(f"Portfolio API listening on port {port}")
    uvicorn.run(app, host="0.0.0.0", port=port)
