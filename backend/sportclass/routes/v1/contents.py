# backend/sportclass/routes/v1/contents.py
"""
Content routes - API v1

Endpoints:
    POST /                      → Create a content for an existing sport
    GET /                       → List contents (optional level or title filter)
    GET /sport/{sport_id}       → Contents of one sport
    GET /{content_id}           → Get one content
"""

import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.params import Path

from ...core.constants import DEFAULT_QUERY_LIMIT, MAX_QUERY_LIMIT
from ...core.exceptions import DomainException
from ...schemas.content import ContentCreate, ContentResponse
from ...services.content_service import ContentService
from .dependencies import ULID_PATH_PATTERN, get_content_service, handle_domain_exception

logger = logging.getLogger(__name__)

router = APIRouter(tags=["contents-v1"])


@router.post("", response_model=ContentResponse, status_code=status.HTTP_201_CREATED)
async def create_content(
    payload: ContentCreate,
    content_service: ContentService = Depends(get_content_service),
) -> ContentResponse:
    try:
        content = await asyncio.to_thread(
            content_service.create_content,
            title=payload.title,
            level=payload.level,
            duration_minutes=payload.duration_minutes,
            sport_id=payload.sport_id,
            description=payload.description,
            url=payload.url,
        )
        return ContentResponse.from_entity(content)
    except DomainException as e:
        handle_domain_exception(e)


@router.get("", response_model=List[ContentResponse])
async def list_contents(
    level: Optional[str] = Query(None),
    title: Optional[str] = Query(None, min_length=1),
    skip: int = Query(0, ge=0),
    limit: int = Query(DEFAULT_QUERY_LIMIT, ge=1, le=MAX_QUERY_LIMIT),
    content_service: ContentService = Depends(get_content_service),
) -> List[ContentResponse]:
    try:
        if level:
            contents = await asyncio.to_thread(content_service.find_by_level, level)
        elif title:
            contents = await asyncio.to_thread(content_service.find_by_title, title)
        else:
            contents = await asyncio.to_thread(content_service.list_contents, skip, limit)
        return [ContentResponse.from_entity(content) for content in contents]
    except DomainException as e:
        handle_domain_exception(e)


@router.get("/sport/{sport_id}", response_model=List[ContentResponse])
async def list_contents_for_sport(
    sport_id: str = Path(..., pattern=ULID_PATH_PATTERN),
    content_service: ContentService = Depends(get_content_service),
) -> List[ContentResponse]:
    try:
        contents = await asyncio.to_thread(content_service.find_by_sport, sport_id)
        return [ContentResponse.from_entity(content) for content in contents]
    except DomainException as e:
        handle_domain_exception(e)


@router.get("/{content_id}", response_model=ContentResponse)
async def get_content(
    content_id: str = Path(..., pattern=ULID_PATH_PATTERN),
    content_service: ContentService = Depends(get_content_service),
) -> ContentResponse:
    try:
        content = await asyncio.to_thread(content_service.get_content, content_id)
        return ContentResponse.from_entity(content)
    except DomainException as e:
        handle_domain_exception(e)
