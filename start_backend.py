#!/usr/bin/env python3
"""
Backend Starter
Starts the FastAPI backend with proper imports
"""

import uvicorn
import os
import sys

if __name__ == "__main__":
    # Run from the project root so relative sqlite paths resolve there
    script_dir = os.path.dirname(os.path.abspath(__file__))
    os.chdir(script_dir)
    sys.path.insert(0, script_dir)

    print(f"🚀 Starting Task Tracker API from: {script_dir}")
    print("📡 Server will be available at: http://localhost:8000")
    print("📄 API docs will be available at: http://localhost:8000/docs")

    uvicorn.run(
        "tasktracker.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["./tasktracker"],
    )
