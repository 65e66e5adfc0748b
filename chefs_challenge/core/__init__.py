"""Core gameplay primitives (orders, stacking, scoring).

Kept free of FastAPI and asyncio concerns so it can be reused by the session
controller, the API layer, and tests.
"""
