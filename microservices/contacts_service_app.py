"""
Contacts microservice (development server).

Implements the REST contract consumed by the contacts client:

    GET    /api/users        -> {"data": [User, ...]}  (alphabetical by name)
    GET    /api/users/{id}   -> {"data": User}
    POST   /api/users        -> 201 {"data": User}
    PUT    /api/users/{id}   -> {"data": User}
    DELETE /api/users/{id}   -> 204, empty body

State is kept in-memory; restarting the process clears it.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, FastAPI, HTTPException, Response

from config.settings import settings
from core.exception_handlers import register_exception_handlers
from core.logging import request_logging_middleware
from core.response import ok
from models.schemas import UserPayload

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.API_TITLE, version=settings.API_VERSION)
router = APIRouter(prefix="/api", tags=["users"])

# ---------------- In-memory store ---------------- #

# id -> user dict (same shape as the JSON returned to clients)
USERS: dict[int, dict] = {}
_next_id = 1


def reset_store() -> None:
    """Drop every user and restart ids at 1."""
    global _next_id
    USERS.clear()
    _next_id = 1


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def _get_or_404(user_id: int) -> dict:
    user = USERS.get(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def _ensure_email_free(email: str, exclude_id: Optional[int] = None) -> None:
    for uid, u in USERS.items():
        if uid != exclude_id and u["email"].lower() == email.lower():
            raise HTTPException(status_code=422, detail="The email has already been taken.")


def _clean(payload: UserPayload) -> dict:
    data = {
        "name": payload.name.strip(),
        "email": payload.email.strip(),
        "phone": payload.phone.strip(),
        "image_url": (payload.image_url or "").strip() or None,
    }
    for field in ("name", "email", "phone"):
        if not data[field]:
            raise HTTPException(status_code=422, detail=f"The {field} field is required.")
    return data

# ---------------- Routes ---------------- #

@router.get("/users")
async def list_users():
    users = sorted(USERS.values(), key=lambda u: (u["name"].lower(), u["id"]))
    return ok(users)


@router.get("/users/{user_id}")
async def show_user(user_id: int):
    return ok(_get_or_404(user_id))


@router.post("/users", status_code=201)
async def store_user(payload: UserPayload):
    global _next_id
    data = _clean(payload)
    _ensure_email_free(data["email"])

    ts = _now()
    user = {"id": _next_id, **data, "created_at": ts, "updated_at": ts}
    USERS[_next_id] = user
    _next_id += 1
    logger.info("Stored user id=%s", user["id"])
    return ok(user)


@router.put("/users/{user_id}")
async def update_user(user_id: int, payload: UserPayload):
    user = _get_or_404(user_id)
    data = _clean(payload)
    _ensure_email_free(data["email"], exclude_id=user_id)

    user.update(data)
    user["updated_at"] = _now()
    logger.info("Updated user id=%s", user_id)
    return ok(user)


@router.delete("/users/{user_id}", status_code=204)
async def destroy_user(user_id: int):
    _get_or_404(user_id)
    del USERS[user_id]
    logger.info("Deleted user id=%s", user_id)
    return Response(status_code=204)


@app.get("/health")
async def health():
    return ok({"status": "ok"})


app.include_router(router)
register_exception_handlers(app)
app.middleware("http")(request_logging_middleware)
