from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from whitelist_admin.core.database import Base


class WhitelistEntry(Base):
    __tablename__ = "whitelist"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    # Unique so that concurrent adds of the same page cannot both commit.
    page_id: Mapped[str] = mapped_column(
        String(100), unique=True, index=True
    )
    merchant_name: Mapped[str] = mapped_column(String(200))
    created_at: Mapped[datetime] = mapped_column(DateTime)
    updated_at: Mapped[datetime] = mapped_column(DateTime)
