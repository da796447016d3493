import logging

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.errors import BlogBuildError
from app.schemas.blog import RebuildResult
from app.services.blog_service import BlogService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/rebuild", response_model=RebuildResult)
def rebuild(service: BlogService = Depends(deps.get_blog_service)):
    """Re-read the content source and replace the current build."""
    try:
        site = deps.rebuild_site(service)
    except BlogBuildError as e:
        logger.error(f"Rebuild failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error during rebuild: {e}")
        raise HTTPException(status_code=500, detail="Failed to rebuild site")

    return RebuildResult(
        posts=len(site.ordered),
        pages=len(site.pages),
        feeds=len(site.feeds),
        builtAt=site.built_at.isoformat(),
    )
