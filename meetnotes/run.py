import uvicorn
from dotenv import load_dotenv

# Load environment variables from .env, overriding any existing ones
load_dotenv(override=True)


# Start the server
def start():
    """Launches the Uvicorn server."""
    from meetnotes.dependencies import get_settings

    settings = get_settings()
    uvicorn.run("meetnotes.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    start()
