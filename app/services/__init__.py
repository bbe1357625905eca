"""서비스 패키지 — 인증 세션 수명주기와 사용자 소유 데이터 로직.

Service package. ``auth_service`` owns credentials and sessions; the
measurement and outfit services take an AuthContext and never trust
an owner id from the request body.
"""
