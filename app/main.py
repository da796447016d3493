import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from app import dependencies as deps
from app.routers import admin, feeds, posts
from app.security import get_api_key
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blog API", description="Markdown blog pages, series and feeds")


def build_on_startup():
    service = deps.get_blog_service(
        repo=deps.get_posts_repo(), parser=deps.get_content_parser()
    )
    return deps.rebuild_site(service)


@asynccontextmanager
async def lifespan(app: FastAPI):
    site = build_on_startup()
    logger.info(f"Initial build ready with {len(site.ordered)} posts")

    try:
        yield
    finally:
        deps.reset_site()
        logger.info("Blog API shut down")


app.router.lifespan_context = lifespan

app.include_router(posts.router)
app.include_router(feeds.router)
app.include_router(admin.router, dependencies=[Depends(get_api_key)])


@app.get("/")
async def root():
    return {"message": "Blog API is running"}
