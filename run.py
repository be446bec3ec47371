"""Development server.

The API runs on its own, but the QR codes point at the frontend's /scan page,
which is only served when FRONTEND_BUILD_PATH holds a built frontend. Without
one, scanned codes open a 404; set PUBLIC_BASE_URL to wherever the frontend is
hosted instead.
"""
import os

import uvicorn
from dotenv import load_dotenv, find_dotenv

env_path = find_dotenv()
if env_path:
    load_dotenv(env_path, override=False)

if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "3000")),
        reload=os.getenv("ENVIRONMENT", "development") == "development",
    )
