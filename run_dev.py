# run_dev.py
"""
Local development launcher for FastAPI.
Equivalent to: `uvicorn gemini_relay.app:app --reload --host 0.0.0.0 --port 3000`
"""

import uvicorn

from gemini_relay.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "gemini_relay.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
