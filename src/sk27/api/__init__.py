"""SK-27 landing page - FastAPI web layer.

Modules
-------
main
    FastAPI application with all route handlers and the ``main()`` CLI
    entry point.
models
    Pydantic models for API responses.
"""
