"""
Input validation schemas using Pydantic for the HTTP layer.
"""
import math
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from larder.utilities.config import DEFAULT_PER_INGREDIENT
from larder.utilities.constants import MAX_BARCODE_LENGTH, MAX_NAME_LENGTH, MIN_ITEM_QUANTITY


class PantryInput(BaseModel):
    """Schema for pantry create / rename."""
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('name required')
        return v


class BarcodeInput(BaseModel):
    """Schema for a barcode attached to an item."""
    code: Optional[str] = Field(None, max_length=MAX_BARCODE_LENGTH)
    label: Optional[str] = Field(None, max_length=MAX_NAME_LENGTH)


class ItemInput(BaseModel):
    """Schema for item creation."""
    pantry_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    quantity: int = Field(MIN_ITEM_QUANTITY)
    barcode: Optional[BarcodeInput] = None

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        v = v.strip()
        if not v:
            raise ValueError('name required')
        return v


class ItemUpdateInput(BaseModel):
    """Schema for item edits; omitted fields are left unchanged."""
    name: Optional[str] = Field(None, max_length=MAX_NAME_LENGTH)
    quantity: Optional[int] = None


class IngredientInput(BaseModel):
    """Schema for one recipe ingredient."""
    name: str = Field(..., max_length=MAX_NAME_LENGTH)
    qty: Optional[float] = Field(None, allow_inf_nan=False)
    unit: Optional[str] = Field(None, max_length=40)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip()


class RecipeInput(BaseModel):
    """Schema for recipe creation."""
    title: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    servings: Optional[int] = Field(None, ge=1)
    steps: Optional[str] = None
    notes: Optional[str] = None
    source_type: Optional[str] = None
    source_url: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    ingredients: List[IngredientInput] = Field(default_factory=list)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('title required')
        return v.strip()

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        """Ensure tags are non-empty strings."""
        return [tag.strip() for tag in v if tag and tag.strip()]


class RecipeUpdateInput(BaseModel):
    """Schema for recipe edits; lists present replace the stored ones."""
    title: Optional[str] = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    servings: Optional[int] = Field(None, ge=1)
    steps: Optional[str] = None
    notes: Optional[str] = None
    source_type: Optional[str] = None
    source_url: Optional[str] = None
    tags: Optional[List[str]] = None
    ingredients: Optional[List[IngredientInput]] = None


class CookInput(BaseModel):
    """Schema for a cook (or simulated cook) request.

    Missing or non-positive ids are rejected by the kitchen service (400).
    """
    pantry_id: Optional[int] = None
    recipe_id: Optional[int] = None
    deduct: bool = False
    per_ingredient: float = Field(DEFAULT_PER_INGREDIENT, ge=0)

    @field_validator('per_ingredient')
    @classmethod
    def finite_fallback(cls, v):
        if not math.isfinite(v):
            raise ValueError('per_ingredient must be a finite number')
        return v
