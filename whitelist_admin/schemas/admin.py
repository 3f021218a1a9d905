from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from whitelist_admin.core.time import isoformat_utc


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class LoginRequest(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=6, max_length=100)


class LoginResponse(CamelModel):
    token: str
    expires_in: int


class CreateWhitelistRequest(CamelModel):
    page_id: str = Field(min_length=1, max_length=100)
    merchant_name: str = Field(min_length=1, max_length=200)


class WhitelistEntryOut(CamelModel):
    id: str
    page_id: str
    merchant_name: str
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def _serialize_timestamp(self, value: datetime) -> str:
        return isoformat_utc(value)


class WhitelistCheckOut(CamelModel):
    page_id: str
    is_whitelisted: bool


class AdminProfileOut(CamelModel):
    username: str
    role: str
    login_time: datetime
    expires_at: datetime

    @field_serializer("login_time", "expires_at")
    def _serialize_timestamp(self, value: datetime) -> str:
        return isoformat_utc(value)
