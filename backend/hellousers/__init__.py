"""
HelloUsers Backend — Application Package Initializer
=====================================================

What: Marks the `hellousers` directory as a Python package.
Who:  Used by uvicorn (`uvicorn hellousers.main:app`), pytest, and `python -m hellousers`.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Payloads)         │  ← Literal and templated values
    ├─────────────────────────────────────┤
    │          Schemas (Data)             │  ← Pydantic request/response models
    └─────────────────────────────────────┘

    There is no persistence layer: every request is handled from scratch.
"""

__version__ = "1.0.0"
