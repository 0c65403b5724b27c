# backend/sportclass/routes/v1/teachers.py
"""
Teacher routes - API v1

Endpoints:
    POST /                              → Register a teacher
    GET /                               → List active teachers (optional name filter)
    GET /specialization/{term}          → Teachers whose specialization contains term
    GET /{teacher_id}                   → Get one teacher
    POST /{teacher_id}/deactivate       → Deactivate
    POST /{teacher_id}/activate         → Reactivate
"""

import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.params import Path

from ...core.exceptions import DomainException
from ...schemas.teacher import TeacherCreate, TeacherResponse
from ...services.teacher_service import TeacherService
from .dependencies import ULID_PATH_PATTERN, get_teacher_service, handle_domain_exception

logger = logging.getLogger(__name__)

router = APIRouter(tags=["teachers-v1"])


@router.post("", response_model=TeacherResponse, status_code=status.HTTP_201_CREATED)
async def create_teacher(
    payload: TeacherCreate,
    teacher_service: TeacherService = Depends(get_teacher_service),
) -> TeacherResponse:
    try:
        teacher = await asyncio.to_thread(
            teacher_service.create_teacher,
            payload.name,
            payload.email,
            payload.specialization,
        )
        return TeacherResponse.from_entity(teacher)
    except DomainException as e:
        handle_domain_exception(e)


@router.get("", response_model=List[TeacherResponse])
async def list_teachers(
    name: Optional[str] = Query(None, min_length=1),
    teacher_service: TeacherService = Depends(get_teacher_service),
) -> List[TeacherResponse]:
    try:
        if name:
            teachers = await asyncio.to_thread(teacher_service.find_by_name, name)
        else:
            teachers = await asyncio.to_thread(teacher_service.list_active_teachers)
        return [TeacherResponse.from_entity(teacher) for teacher in teachers]
    except DomainException as e:
        handle_domain_exception(e)


@router.get("/specialization/{term}", response_model=List[TeacherResponse])
async def find_by_specialization(
    term: str,
    teacher_service: TeacherService = Depends(get_teacher_service),
) -> List[TeacherResponse]:
    try:
        teachers = await asyncio.to_thread(teacher_service.find_by_specialization, term)
        return [TeacherResponse.from_entity(teacher) for teacher in teachers]
    except DomainException as e:
        handle_domain_exception(e)


@router.get("/{teacher_id}", response_model=TeacherResponse)
async def get_teacher(
    teacher_id: str = Path(..., pattern=ULID_PATH_PATTERN),
    teacher_service: TeacherService = Depends(get_teacher_service),
) -> TeacherResponse:
    try:
        teacher = await asyncio.to_thread(teacher_service.get_teacher, teacher_id)
        return TeacherResponse.from_entity(teacher)
    except DomainException as e:
        handle_domain_exception(e)


@router.post("/{teacher_id}/deactivate", response_model=TeacherResponse)
async def deactivate_teacher(
    teacher_id: str = Path(..., pattern=ULID_PATH_PATTERN),
    teacher_service: TeacherService = Depends(get_teacher_service),
) -> TeacherResponse:
    """Deactivate a teacher. Already booked lessons are kept."""
    try:
        teacher = await asyncio.to_thread(teacher_service.deactivate_teacher, teacher_id)
        return TeacherResponse.from_entity(teacher)
    except DomainException as e:
        handle_domain_exception(e)


@router.post("/{teacher_id}/activate", response_model=TeacherResponse)
async def activate_teacher(
    teacher_id: str = Path(..., pattern=ULID_PATH_PATTERN),
    teacher_service: TeacherService = Depends(get_teacher_service),
) -> TeacherResponse:
    try:
        teacher = await asyncio.to_thread(teacher_service.activate_teacher, teacher_id)
        return TeacherResponse.from_entity(teacher)
    except DomainException as e:
        handle_domain_exception(e)
