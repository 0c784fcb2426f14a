import os
from pathlib import Path
from dotenv import load_dotenv

# This points to the project root (one level above the package)
BASE_DIR = Path(__file__).resolve().parent.parent

PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", str(BASE_DIR)))

load_dotenv(PROJECT_ROOT / ".env")

# Video store backend: "memory" keeps everything in-process, "supabase" uses the videos table
VIDEO_STORE = os.getenv("VIDEO_STORE", "memory").lower()

# Supabase Config
SUPABASE_URL = os.getenv("SUPABASE_URL") or os.getenv("NEXT_PUBLIC_SUPABASE_URL")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY") or os.getenv("NEXT_PUBLIC_SUPABASE_ANON_KEY")
SUPABASE_VIDEOS_TABLE = os.getenv("SUPABASE_VIDEOS_TABLE", "videos")

# API Config
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
