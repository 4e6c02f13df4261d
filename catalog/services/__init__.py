"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services own the unit of work: they call repositories, then commit or
roll back the request's session.
"""
