# menu_api/models/response_models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class Category(BaseModel):
    id: Optional[str] = None
    name: str = ""
    description: str = ""


class MenuItem(BaseModel):
    id: Optional[str] = None
    name: str = ""
    price: str = ""
    description: str = ""
    image: Optional[str] = None


class SearchResult(MenuItem):
    # name of the category the item was found under
    category: str


class ItemDetail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: str = ""
    price: str = ""
    description: str = ""
    image: Optional[str] = None
    ingredients: List[str] = Field(default_factory=list)
    allergens: List[str] = Field(default_factory=list)
    nutritional_info: Dict[str, str] = Field(default_factory=dict, alias="nutritionalInfo")


class RestaurantInfo(BaseModel):
    name: str = ""
    address: str = ""
    phone: str = ""
    hours: str = ""
    description: str = ""


class Special(BaseModel):
    id: Optional[str] = None
    name: str = ""
    price: str = ""
    description: str = ""


class SuccessResponse(BaseModel):
    success: bool = True
    data: Any


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
