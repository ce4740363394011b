import uvicorn
from .config import server

def main():
    uvicorn.run(
        "pooseboard.main:app",
        host=server.HOST,
        port=server.PORT,
        log_level=server.LOG_LEVEL.lower(),
    )

if __name__ == "__main__":
    main()
