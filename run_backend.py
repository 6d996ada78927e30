#!/usr/bin/env python
"""Script to run the Task Manager API server."""
import sys
import os
from pathlib import Path

# Get the directory where this script is located
script_dir = Path(__file__).resolve().parent

# Add project directory to Python path
sys.path.insert(0, str(script_dir))

# Change to project directory so the default SQLite file lands here
os.chdir(script_dir)

# Now run uvicorn
import uvicorn

from task_manager.config import PORT

if __name__ == "__main__":
    uvicorn.run(
        "task_manager.main:app",
        host="0.0.0.0",
        port=PORT,
        reload=os.getenv("RELOAD", "").lower() in ("1", "true"),
    )
