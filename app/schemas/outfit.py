"""옷장 아이템 Pydantic 요청/응답 스키마 정의.

Wardrobe outfit request/response schema definitions.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class OutfitSave(BaseModel):
    """옷장 아이템 생성/수정 요청 스키마.

    Outfit create/update request schema. PUT replaces every field.
    The owner comes from the access token, never from the body.

    Attributes:
        name: 이름 (Display name, required)
        description: 설명 (Description)
        category: 분류 (Category, default "Casual")
        brand: 브랜드 (Brand)
        size: 사이즈 (Size label)
        color: 색상 (Color)
        type: 종류 (Garment type, default "Shirt")
        image_url: 이미지 URL (Image location)
    """

    name: str = Field(min_length=1, max_length=100)
    description: str = Field("", max_length=500)
    category: str = Field("Casual", min_length=1, max_length=50)
    brand: str = Field("", max_length=50)
    size: str = Field("", max_length=20)
    color: str = Field("", max_length=50)
    type: str = Field("Shirt", min_length=1, max_length=50)
    image_url: str = ""


class OutfitResponse(BaseModel):
    """옷장 아이템 응답 스키마 — Outfit response schema."""

    id: int
    name: str
    description: str
    category: str
    brand: str
    size: str
    color: str
    type: str
    image_url: str
    created_at: datetime
    updated_at: datetime


class SeedSampleResponse(BaseModel):
    """샘플 옷장 생성 응답 — Result of seeding the sample wardrobe."""

    message: str
    count: int
