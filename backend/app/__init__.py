"""
Notes API — Application Package Initializer
============================================

What: Marks the `app` directory as a Python package.
Why:  Enables module imports like `from app.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend follows the same layered shape as any of our FastAPI services:

    ┌─────────────────────────────────────┐
    │     Routes + Auth gate (API Layer)  │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (ownership decisions)    │  ← 403/404 rules live here
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← dataclass Note + Pydantic
    ├─────────────────────────────────────┤
    │        NoteStore (in-memory)        │  ← one instance per app
    └─────────────────────────────────────┘

    Routes never touch the store directly; every read or write goes through
    NoteService so the ownership policy is applied in exactly one place.
"""

__version__ = "1.0.0"
