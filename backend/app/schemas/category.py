"""
Category Schemas
Pydantic models for Category API responses.
"""

from pydantic import BaseModel


class CategoryResponse(BaseModel):
    """Schema for category response"""
    id: int
    label: str

    model_config = {"from_attributes": True}
