import uuid
from datetime import datetime

from sqlalchemy import DateTime, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, registry

table_registry = registry()


@table_registry.mapped_as_dataclass
class Film:
    __tablename__ = "films"

    id: Mapped[uuid.UUID] = mapped_column(init=False, primary_key=True, default=uuid.uuid4)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), init=False, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), init=False, server_default=func.now(), onupdate=func.now()
    )
    title: Mapped[str] = mapped_column(Text)
    release_year: Mapped[int] = mapped_column(Integer)
    summary: Mapped[str] = mapped_column(Text)
    runtime_mins: Mapped[int] = mapped_column(Integer)
