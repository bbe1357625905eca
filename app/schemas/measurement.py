"""신체 치수 Pydantic 스키마 — Measurement request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class MeasurementSave(BaseModel):
    """치수 저장 요청 스키마 (생성/갱신 공용).

    Measurement upsert request. Lengths in centimetres, weight in kilograms.
    The owner comes from the access token, never from the body.
    """

    height: float = Field(0, ge=0, le=300)
    weight: float = Field(0, ge=0, le=500)
    chest: float = Field(0, ge=0, le=300)
    waist: float = Field(0, ge=0, le=300)
    hips: float = Field(0, ge=0, le=300)
    inseam: float = Field(0, ge=0, le=300)
    shoulders: float = Field(0, ge=0, le=300)
    neck_circumference: float = Field(0, ge=0, le=300)
    sleeve_length: float = Field(0, ge=0, le=300)
    thigh: float = Field(0, ge=0, le=300)
    skin_color: str = Field("", max_length=50)
    description: str = Field("", max_length=500)


class MeasurementResponse(BaseModel):
    """치수 응답 스키마 — Measurement response."""

    id: int
    user_id: int
    height: float
    weight: float
    chest: float
    waist: float
    hips: float
    inseam: float
    shoulders: float
    neck_circumference: float
    sleeve_length: float
    thigh: float
    skin_color: str
    description: str
    created_at: datetime
    updated_at: datetime
