"""레포지토리 패키지 — 데이터베이스 조회 계층.

Repository package — Read-only database query layer.
Repositories receive their session factory at construction, extend
BaseRepository for session handling and failure classification, and return
the outcomes defined in app.repositories.result.
"""
