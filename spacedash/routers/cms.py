from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from spacedash.db import get_db
from spacedash.repositories import active_cms_block
from spacedash.schemas import CmsBlockOut

router = APIRouter(prefix="/api/cms", tags=["cms"])


@router.get("/{slug}", response_model=CmsBlockOut)
def get_block(slug: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """Active CMS block by slug. Content is trusted HTML authored by editors."""
    block = active_cms_block(db, slug)
    if block is None:
        raise HTTPException(404, "Block not found")
    return {"slug": block.slug, "content": block.content}
