"""Course router — CRUD endpoints the courses widget's row actions point at."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from widget_table.core.response import DataResponse, redirect_back
from widget_table.db.base import get_db
from widget_table.schemas.course import CourseCreate, CourseOut, CourseUpdate
from widget_table.services.course import CourseService

router = APIRouter(prefix="/courses", tags=["Courses"])


@router.post("", response_model=DataResponse[CourseOut], status_code=status.HTTP_201_CREATED)
async def create_course(
    body: CourseCreate,
    session: AsyncSession = Depends(get_db),
):
    course = await CourseService(session).create_course(body)
    return {"data": CourseOut.model_validate(course)}


@router.get("/{course_id}", response_model=DataResponse[CourseOut])
async def get_course(
    course_id: str,
    session: AsyncSession = Depends(get_db),
):
    course = await CourseService(session).get_course(course_id)
    return {"data": CourseOut.model_validate(course)}


@router.put("/{course_id}", response_model=DataResponse[CourseOut])
async def update_course(
    course_id: str,
    body: CourseUpdate,
    session: AsyncSession = Depends(get_db),
):
    course = await CourseService(session).update_course(course_id, body)
    return {"data": CourseOut.model_validate(course)}


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_course(
    course_id: str,
    request: Request,
    session: AsyncSession = Depends(get_db),
):
    """Soft-delete, then send the client back to the table it came from."""
    await CourseService(session).delete_course(course_id)
    return redirect_back(request)
