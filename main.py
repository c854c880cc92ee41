from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from database import UPLOAD_DIR, PORT, CORS_ORIGINS
from routes.property import router as property_router
from utils.file_utils import UploadRejected
import logging
import os

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Listings API")


def error_response(request: Request, exc: Exception):
    logger.error(f"Error handling {request.method} {request.url.path}: {str(exc)}", exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Something went wrong!"})


# Registered before CORS so CORS wraps it and error replies keep their CORS headers
@app.middleware("http")
async def catch_unhandled_errors(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as e:
        return error_response(request, e)


# CORS Setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount the uploads directory to serve images
os.makedirs(UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=UPLOAD_DIR), name="uploads")

# Include routers
app.include_router(property_router)


@app.exception_handler(UploadRejected)
async def handle_upload_rejected(request: Request, exc: UploadRejected):
    return error_response(request, exc)


# Root endpoint
@app.get("/")
def read_root():
    return {"message": "Listings API is running"}


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Server running at http://0.0.0.0:{PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
