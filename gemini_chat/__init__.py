"""
Gemini chat gateway.

A FastAPI service that forwards chat requests to Google Gemini through the
Google Gen AI SDK and exposes the provider's model catalog.

Project Structure:
- api/: HTTP routes (/api/chat, /api/models)
- models/: Pydantic schemas
- services/: Gemini client, chat orchestration, model discovery
- config.py: Settings from environment / .env
- deps.py: Dependency injection
- main.py: FastAPI application entry point

Quick Start:
    1. Set environment variables:
       export GEMINI_API_KEY="your-api-key"

    2. Install:
       pip install -e .

    3. Run the service:
       python -m gemini_chat.run
       # or
       uvicorn gemini_chat.main:app --reload

    4. Access API docs:
       http://localhost:8080/docs
"""

__version__ = "1.0.0"
