"""레포지토리 패키지 — 사용자, 리프레시 토큰, 치수, 옷장 쿼리.

Repository package. Pure database access for users, refresh tokens,
measurements and outfits; owner-scoped CRUD lives in ``base``.
"""
