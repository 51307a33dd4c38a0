"""
User API routes
Each handler issues exactly one statement through the users service.
"""

import logging
import re
from typing import List
from fastapi import APIRouter, HTTPException, Depends, Response, status

from user_api.models.user import User, UserPayload
from user_api.services.users_service import UsersService, get_users_service

router = APIRouter()
logger = logging.getLogger(__name__)

# Signed ASCII decimal; values must also fit in 64 bits
NUMERIC_ID = re.compile(r"[+-]?[0-9]+")
INT64_MIN, INT64_MAX = -2**63, 2**63 - 1


def parse_user_id(user_id: str) -> int:
    """Parse a path identifier, raising 400 for anything that is not a 64-bit integer"""
    if not NUMERIC_ID.fullmatch(user_id):
        raise HTTPException(status_code=400, detail="Invalid ID")

    parsed_id = int(user_id)
    if not INT64_MIN <= parsed_id <= INT64_MAX:
        raise HTTPException(status_code=400, detail="Invalid ID")

    return parsed_id


@router.get(
    "",
    response_model=List[User],
    summary="Get all users",
    description="Get a list of all users",
)
async def list_users(users_service: UsersService = Depends(get_users_service)):
    result = await users_service.list_users()

    if not result.success:
        raise HTTPException(status_code=500, detail=result.error)

    return [User(**row) for row in result.data]


@router.get(
    "/{user_id}",
    response_model=User,
    summary="Get a user",
    description="Get a user by ID",
)
async def get_user(user_id: str, users_service: UsersService = Depends(get_users_service)):
    # Lookup failures of any kind are reported as not found
    result = await users_service.get_user(user_id)

    if not result.success or not result.data:
        raise HTTPException(status_code=404, detail="User not found")

    return User(**result.data[0])


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    description="Create a new user",
)
async def create_user(request: UserPayload, users_service: UsersService = Depends(get_users_service)):
    result = await users_service.create_user(name=request.name, email=request.email)

    if not result.success:
        raise HTTPException(status_code=500, detail=result.error)

    return User(**result.data[0])


@router.put(
    "/{user_id}",
    response_model=User,
    summary="Update a user",
    description="Update a user by ID",
)
async def update_user(
    user_id: str,
    request: UserPayload,
    users_service: UsersService = Depends(get_users_service)
):
    parsed_id = parse_user_id(user_id)

    result = await users_service.update_user(parsed_id, name=request.name, email=request.email)

    if not result.success:
        raise HTTPException(status_code=500, detail=result.error)

    if result.count == 0:
        logger.info(f"Update matched no rows for user {parsed_id}")

    return User(id=parsed_id, name=request.name, email=request.email)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a user",
    description="Delete a user by ID",
)
async def delete_user(user_id: str, users_service: UsersService = Depends(get_users_service)):
    result = await users_service.delete_user(user_id)

    if not result.success:
        raise HTTPException(status_code=500, detail=result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
