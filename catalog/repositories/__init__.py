"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Repositories handle pure database operations and never commit;
each extends BaseRepository and adds domain-specific queries.
"""
