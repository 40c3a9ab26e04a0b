# menu_api/models/request_models.py
from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    # matched case-insensitively against item name and description
    query: str = Field(min_length=1)
