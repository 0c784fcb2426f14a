import uvicorn
from videolike.config import HOST, PORT
from videolike.main import app

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
