"""Postercraft — FastAPI REST API layer.

This package contains the FastAPI application, Pydantic request/response
models, the poster prompt composer, and the generation request handler.

Modules
-------
main
    FastAPI application with all route handlers and the ``main()`` CLI
    entry point.
models
    Pydantic models for API request and response validation.
prompt_builder
    Deterministic prompt, dimension and step-count composition.
generation
    Payload validation, the single provider call, and result mapping.
"""
