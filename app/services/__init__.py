"""서비스 패키지 — 요청 계층 로직.

Service package — Request-layer logic.
Services call one repository operation per request and translate its outcome
into a response payload or an HTTP error.
"""
