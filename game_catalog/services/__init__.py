"""
Service layer for business logic.

Keeps validation and lookup rules apart from storage, so callers
(an HTTP adapter, a UI, tests) work against plain structured responses.
"""
