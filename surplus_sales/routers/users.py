from fastapi import APIRouter, Depends, HTTPException, Request, status

from surplus_sales.core.auth import get_admin_user, get_current_user, get_optional_user
from surplus_sales.core.deps import get_user_repository
from surplus_sales.core.jwt import create_user_token
from surplus_sales.core.rate_limiter import limiter
from surplus_sales.models.users import ROLE_ADMIN
from surplus_sales.repositories.users import UserRepository
from surplus_sales.schemas.user import (
    AuthResponse,
    PasswordUpdate,
    UserCreate,
    UserLogin,
    UserResponse,
    UserUpdate,
)

router = APIRouter(prefix="/users", tags=["Users"])

COMMON_PASSWORDS = {
    "password",
    "password123",
    "12345678",
    "qwerty123",
    "admin123",
}


def _check_password_strength(password: str):
    if password.lower() in COMMON_PASSWORDS:
        raise HTTPException(
            status_code=400,
            detail="Password is too common. Please choose a stronger password.",
        )

    if password.isdigit():
        raise HTTPException(
            status_code=400,
            detail="Password cannot be numbers only.",
        )


def _require_self_or_admin(user_id: str, current_user):
    if current_user.id != user_id and current_user.role != ROLE_ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not allowed to modify another user",
        )


# ---------------- REGISTER ----------------
@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit("3/minute")
def register(
    request: Request,
    user_data: UserCreate,
    repo: UserRepository = Depends(get_user_repository),
    caller=Depends(get_optional_user),
):
    # Only an admin may create another admin
    if user_data.role == ROLE_ADMIN and (caller is None or caller.role != ROLE_ADMIN):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required",
        )

    _check_password_strength(user_data.password)

    user = repo.create(
        full_name=user_data.full_name,
        email=user_data.email,
        password=user_data.password,
        role=user_data.role,
    )

    return {
        "message": "User registered successfully",
        "user": user,
        "token": create_user_token(user),
    }


# ---------------- LOGIN (TOKEN-BASED) ----------------
@router.post("/login", response_model=AuthResponse)
@limiter.limit("5/minute")
def login(
    request: Request,
    credentials: UserLogin,
    repo: UserRepository = Depends(get_user_repository),
):
    user = repo.authenticate(credentials.email, credentials.password)

    if user is None:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    if not user.is_active:
        raise HTTPException(status_code=403, detail="Account is inactive")

    return {
        "message": "Login successful",
        "user": user,
        "token": create_user_token(user),
    }


# ---------------- ACCOUNTS ----------------
@router.get("", response_model=list[UserResponse])
def list_users(
    repo: UserRepository = Depends(get_user_repository),
    current_user=Depends(get_current_user),
):
    return repo.list()


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    repo: UserRepository = Depends(get_user_repository),
    current_user=Depends(get_current_user),
):
    return repo.get(user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    user_data: UserUpdate,
    repo: UserRepository = Depends(get_user_repository),
    current_user=Depends(get_current_user),
):
    _require_self_or_admin(user_id, current_user)

    if user_data.role is not None and current_user.role != ROLE_ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required",
        )

    return repo.update(user_id, user_data.model_dump(exclude_unset=True))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: str,
    repo: UserRepository = Depends(get_user_repository),
    admin=Depends(get_admin_user),
):
    repo.delete(user_id)
    return None


@router.put("/{user_id}/activate", response_model=UserResponse)
def activate_user(
    user_id: str,
    repo: UserRepository = Depends(get_user_repository),
    admin=Depends(get_admin_user),
):
    return repo.set_active(user_id, True)


@router.put("/{user_id}/deactivate", response_model=UserResponse)
def deactivate_user(
    user_id: str,
    repo: UserRepository = Depends(get_user_repository),
    admin=Depends(get_admin_user),
):
    return repo.set_active(user_id, False)


# ---------------- PASSWORD ----------------
@router.put("/{user_id}/password")
def update_password(
    user_id: str,
    password_data: PasswordUpdate,
    repo: UserRepository = Depends(get_user_repository),
    current_user=Depends(get_current_user),
):
    _require_self_or_admin(user_id, current_user)
    _check_password_strength(password_data.new_password)

    repo.update_password(user_id, password_data.new_password)

    return {"message": "Password updated successfully"}
