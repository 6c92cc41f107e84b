"""
Convenience launcher: python -m gemini_chat.run
"""
import uvicorn

from .config import settings

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Gemini Chat Gateway...")
    print("=" * 60)
    print(f"API Documentation: http://localhost:{settings.PORT}/docs")
    print(f"Health Check: http://localhost:{settings.PORT}/api/chat/health")
    print("=" * 60)
    print()

    # Import string so reload works
    uvicorn.run(
        "gemini_chat.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "dev",
        log_level=settings.LOG_LEVEL.lower(),
    )
