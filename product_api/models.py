# product_api/models.py
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: Optional[str] = None
    price: Union[int, float]
    category: str
    in_stock: bool = Field(default=True, alias="inStock")


class PageResult(BaseModel):
    page: int
    total: int
    results: List[Product]


class DeleteResult(BaseModel):
    message: str
    product: Product
