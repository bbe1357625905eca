"""공통 Pydantic 요청/응답 스키마 정의.

Common Pydantic request/response schema definitions shared across
API domains.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """범용 메시지 응답 스키마.

    Generic message response schema for simple confirmations.
    Used for logout, delete operations and other actions
    that return a human-readable confirmation message.

    Attributes:
        message: 응답 메시지 (Response message string)
    """

    message: str  # 응답 메시지 (Human-readable confirmation message)
