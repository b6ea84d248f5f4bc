"""
Hello Server — Application Package Initializer
================================================

What: Marks the `hello_server` directory as a Python package.
Who:  Used by uvicorn (`uvicorn hello_server.main:app`), pytest and the
      `hello-server` console script.

Architecture Note:
    A tutorial service laid out in thin layers:

    ┌─────────────────────────────────────┐
    │        Middleware (say-hi, …)       │  ← cross-cutting header stamping
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← extraction + response shaping
    ├─────────────────────────────────────┤
    │        Schemas & State (Data)       │  ← Pydantic models, request counter
    └─────────────────────────────────────┘

    Routing, extraction and static file serving come from FastAPI/Starlette.
    Nothing is persisted; the only shared state is the request counter.
"""

__version__ = "0.1.0"
