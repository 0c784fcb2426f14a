from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from videolike.config import CORS_ORIGINS
from videolike.api.v1.endpoints.videos import router as video_router

app = FastAPI(title="Video Likes API")

# Setup CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(video_router)

@app.get("/")
async def root():
    return {"status": "ok", "message": "Video Likes API is running"}
