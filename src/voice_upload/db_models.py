from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlalchemy.types import Text
from sqlmodel import Field, SQLModel


class Transcription(SQLModel, table=True):
    __tablename__ = "transcriptions"

    id: Optional[int] = Field(default=None, primary_key=True)
    filename: str = Field(max_length=1024)
    transcription: str = Field(sa_column=Column(Text, nullable=False))
    file_url: str = Field(sa_column=Column(Text, nullable=False))
    uploaded_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False)
    )
