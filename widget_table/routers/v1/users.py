"""User router — CRUD plus the per-user courses widget."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from widget_table.core.response import DataResponse, redirect_back
from widget_table.db.base import get_db
from widget_table.schemas.user import UserCreate, UserOut, UserUpdate
from widget_table.schemas.widget_table import WidgetTableOut
from widget_table.services.user import UserService
from widget_table.services.widgets import courses_widget

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=DataResponse[UserOut], status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserCreate,
    session: AsyncSession = Depends(get_db),
):
    user = await UserService(session).create_user(body)
    return {"data": UserOut.model_validate(user)}


@router.get("/{user_id}", response_model=DataResponse[UserOut])
async def get_user(
    user_id: str,
    session: AsyncSession = Depends(get_db),
):
    user = await UserService(session).get_user(user_id)
    return {"data": UserOut.model_validate(user)}


@router.put("/{user_id}", response_model=DataResponse[UserOut])
async def update_user(
    user_id: str,
    body: UserUpdate,
    session: AsyncSession = Depends(get_db),
):
    user = await UserService(session).update_user(user_id, body)
    return {"data": UserOut.model_validate(user)}


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    request: Request,
    session: AsyncSession = Depends(get_db),
):
    """Soft-delete, then send the client back to the table it came from."""
    await UserService(session).delete_user(user_id)
    return redirect_back(request)


@router.get("/{user_id}/courses", response_model=DataResponse[WidgetTableOut])
async def user_courses(
    user_id: str,
    request: Request,
    session: AsyncSession = Depends(get_db),
):
    """Courses widget scoped to one user's courses."""
    await UserService(session).get_user(user_id)  # raises 404 if missing
    widget = await courses_widget(session).build(
        request.query_params,
        base_path=request.url.path,
        filters={"user_id": user_id},
    )
    return {"data": widget}
