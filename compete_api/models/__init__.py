from sqlalchemy.orm import mapped_column
from datetime import datetime
from sqlalchemy import DateTime, Integer, String, Text, func
from typing import Annotated


int_pk = Annotated[int, mapped_column(Integer, primary_key=True, autoincrement=True)]
created_at = Annotated[
    datetime, mapped_column(DateTime(timezone=True), server_default=func.now())
]
updated_at = Annotated[
    datetime,
    mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    ),
]
str_uniq = Annotated[str, mapped_column(String(255), unique=True, nullable=False)]
str_required = Annotated[str, mapped_column(String(255), nullable=False)]
str_nullable = Annotated[str, mapped_column(String(255), nullable=True)]
text_required = Annotated[str, mapped_column(Text, nullable=False)]
