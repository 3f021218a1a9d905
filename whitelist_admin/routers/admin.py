from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from whitelist_admin.core.database import get_db
from whitelist_admin.core.errors import ValidationError
from whitelist_admin.responses import success_response
from whitelist_admin.schemas.admin import (AdminProfileOut,
                                           CreateWhitelistRequest,
                                           LoginRequest, LoginResponse,
                                           WhitelistCheckOut,
                                           WhitelistEntryOut)
from whitelist_admin.services import auth as auth_service
from whitelist_admin.services import whitelist as whitelist_service
from whitelist_admin.services.auth import AdminPrincipal, require_admin

router = APIRouter(prefix="/admin")


def _dump(model) -> dict:
    return model.model_dump(mode="json", by_alias=True)


@router.post("/login")
def admin_login(payload: LoginRequest) -> JSONResponse:
    token, expires_in = auth_service.login(
        payload.username, payload.password
    )
    return success_response(
        _dump(LoginResponse(token=token, expires_in=expires_in)),
        message="Login successful",
    )


@router.get("/whitelist")
def admin_whitelist_list(
    admin: AdminPrincipal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> JSONResponse:
    entries = whitelist_service.list_entries(db)
    return success_response(
        [_dump(WhitelistEntryOut.model_validate(entry)) for entry in entries],
        message=f"Retrieved {len(entries)} whitelist entries",
    )


@router.post("/whitelist")
def admin_whitelist_add(
    payload: CreateWhitelistRequest,
    admin: AdminPrincipal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> JSONResponse:
    entry = whitelist_service.add_entry(
        db, payload.page_id, payload.merchant_name
    )
    return success_response(
        _dump(WhitelistEntryOut.model_validate(entry)),
        message="Merchant added to whitelist successfully",
        status_code=201,
    )


@router.delete("/whitelist/{entry_id}")
def admin_whitelist_remove(
    entry_id: str,
    admin: AdminPrincipal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> JSONResponse:
    if not entry_id.strip():
        raise ValidationError("ID parameter is required")
    whitelist_service.remove_entry(db, entry_id)
    return success_response(
        message="Merchant removed from whitelist successfully"
    )


@router.get("/whitelist/check/{page_id}")
def admin_whitelist_check(
    page_id: str,
    admin: AdminPrincipal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> JSONResponse:
    if not page_id.strip():
        raise ValidationError("Page ID parameter is required")
    whitelisted = whitelist_service.is_whitelisted(db, page_id)
    return success_response(
        _dump(WhitelistCheckOut(page_id=page_id, is_whitelisted=whitelisted)),
        message=(
            "Page is whitelisted" if whitelisted
            else "Page is not whitelisted"
        ),
    )


@router.get("/profile")
def admin_profile(
    admin: AdminPrincipal = Depends(require_admin),
) -> JSONResponse:
    profile = AdminProfileOut(
        username=admin.username,
        role=admin.role,
        login_time=admin.issued_at,
        expires_at=admin.expires_at,
    )
    return success_response(
        _dump(profile),
        message="Admin profile retrieved successfully",
    )
