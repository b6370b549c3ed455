import uvicorn

from signup.app_factory import create_app
from signup.core.config import Settings, setup_logging

settings = Settings.from_env()
setup_logging(settings.log_level)

# For uvicorn: target `signup.app:app`
app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
