from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.sql import func

from ninetoes.core.database import Base


class StoredValue(Base):
    __tablename__ = "stored_values"

    key = Column(String(100), primary_key=True, index=True)
    value = Column(Text, nullable=False)  # opaque JSON owned by the client
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
