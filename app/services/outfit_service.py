"""옷장 서비스 — 옷장 아이템 CRUD 비즈니스 로직.

Wardrobe Service — Business logic for outfit CRUD and the sample wardrobe.
Every operation is scoped to ``auth.user_id``; an outfit owned by
another user is reported as not found.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.outfit import Outfit
from app.repositories.outfit_repository import outfit_repository
from app.schemas.auth import AuthContext
from app.schemas.outfit import OutfitResponse, OutfitSave
from app.utils.exceptions import BadRequestError, NotFoundError

# 샘플 옷장 — (name, description, category, color, type)
SAMPLE_OUTFITS: tuple[tuple[str, str, str, str, str], ...] = (
    ("Classic White Shirt", "A timeless white button-down shirt perfect for any occasion", "Business", "White", "shirt"),
    ("Casual Blue T-Shirt", "Comfortable cotton t-shirt for everyday wear", "Casual", "Blue", "t-shirt"),
    ("Elegant Black Blouse", "Sophisticated blouse perfect for formal events", "Formal", "Black", "blouse"),
    ("Cozy Gray Sweater", "Warm and comfortable sweater for cool weather", "Casual", "Gray", "sweater"),
    ("Navy Blue Blazer", "Professional blazer for business meetings", "Business", "Navy", "blazer"),
    ("Dark Blue Jeans", "Classic straight-leg jeans that go with everything", "Casual", "Dark Blue", "jeans"),
    ("Black Formal Pants", "Tailored pants perfect for business attire", "Business", "Black", "pants"),
    ("Khaki Chinos", "Versatile chino pants for smart casual looks", "Casual", "Khaki", "pants"),
    ("Pleated Mini Skirt", "Trendy pleated skirt for a youthful look", "Casual", "Navy", "skirt"),
    ("Black Leggings", "Comfortable stretch leggings for active wear", "Sport", "Black", "leggings"),
    ("Little Black Dress", "Classic black dress suitable for any formal occasion", "Formal", "Black", "dress"),
    ("Floral Summer Dress", "Light and airy dress perfect for summer days", "Casual", "Floral", "dress"),
    ("Elegant Evening Gown", "Stunning gown for special occasions and events", "Formal", "Burgundy", "gown"),
    ("Casual Denim Jumpsuit", "Trendy jumpsuit for a modern casual look", "Casual", "Blue", "jumpsuit"),
    ("Bohemian Maxi Frock", "Free-flowing frock with bohemian style", "Casual", "Multicolor", "frock"),
)


class OutfitService:
    """옷장 아이템 관련 비즈니스 로직을 처리하는 서비스.

    Service handling wardrobe outfit business logic.
    """

    def _to_response(self, outfit: Outfit) -> OutfitResponse:
        """옷장 아이템 모델을 응답 스키마로 변환합니다.

        Convert an Outfit model instance to an OutfitResponse schema.
        """
        return OutfitResponse(
            id=outfit.id,
            name=outfit.name,
            description=outfit.description,
            category=outfit.category,
            brand=outfit.brand,
            size=outfit.size,
            color=outfit.color,
            type=outfit.type,
            image_url=outfit.image_url,
            created_at=outfit.created_at,
            updated_at=outfit.updated_at,
        )

    async def list_outfits(self, db: AsyncSession, auth: AuthContext) -> list[OutfitResponse]:
        """내 옷장 목록을 최신순으로 조회합니다.

        List the caller's outfits, newest first.
        """
        outfits = await outfit_repository.get_all(
            db, user_id=auth.user_id, order_by=(Outfit.created_at.desc(), Outfit.id.desc())
        )
        return [self._to_response(o) for o in outfits]

    async def create_outfit(
        self,
        db: AsyncSession,
        auth: AuthContext,
        data: OutfitSave,
    ) -> OutfitResponse:
        """옷장 아이템을 생성합니다.

        Create an outfit owned by the caller.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            auth: 인증 컨텍스트 (Authenticated context)
            data: 생성 데이터 (Outfit data)

        Returns:
            OutfitResponse: 생성된 아이템 (Created outfit)
        """
        outfit: Outfit = await outfit_repository.create(
            db, {"user_id": auth.user_id, **data.model_dump()}
        )
        return self._to_response(outfit)

    async def update_outfit(
        self,
        db: AsyncSession,
        auth: AuthContext,
        outfit_id: int,
        data: OutfitSave,
    ) -> OutfitResponse:
        """옷장 아이템을 수정합니다.

        Update an outfit owned by the caller.

        Raises:
            NotFoundError: 아이템이 없거나 소유자가 아닐 때 (Missing or not owned)
        """
        outfit: Outfit | None = await outfit_repository.update(
            db, outfit_id, data.model_dump(), user_id=auth.user_id
        )
        if outfit is None:
            raise NotFoundError("Outfit not found")
        return self._to_response(outfit)

    async def delete_outfit(
        self,
        db: AsyncSession,
        auth: AuthContext,
        outfit_id: int,
    ) -> None:
        """옷장 아이템을 삭제합니다.

        Raises:
            NotFoundError: 아이템이 없거나 소유자가 아닐 때 (Missing or not owned)
        """
        if not await outfit_repository.delete(db, outfit_id, user_id=auth.user_id):
            raise NotFoundError("Outfit not found")

    async def seed_sample_data(self, db: AsyncSession, auth: AuthContext) -> int:
        """빈 옷장에 샘플 아이템을 채웁니다.

        Fill the caller's empty wardrobe with the sample outfits.

        Returns:
            int: 생성된 아이템 수 (Number of outfits created)

        Raises:
            BadRequestError: 이미 아이템이 있을 때 (Wardrobe is not empty)
        """
        if await outfit_repository.count(db, user_id=auth.user_id) > 0:
            raise BadRequestError(
                "Sample data already exists. "
                "Please delete existing clothes first if you want to reseed."
            )

        for name, description, category, color, garment_type in SAMPLE_OUTFITS:
            await outfit_repository.create(
                db,
                {
                    "user_id": auth.user_id,
                    "name": name,
                    "description": description,
                    "category": category,
                    "brand": "FITON",
                    "size": "M",
                    "color": color,
                    "type": garment_type,
                    "image_url": "",
                },
            )
        return len(SAMPLE_OUTFITS)


# 싱글턴 인스턴스 — Singleton instance
outfit_service: OutfitService = OutfitService()
