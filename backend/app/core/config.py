from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Journal API"
    API_PREFIX: str = ""

    # Browser origins allowed to call the API (the Streamlit UI)
    CORS_ORIGINS: list[str] = ["http://localhost:8501", "http://127.0.0.1:8501"]

    LOG_LEVEL: str = "INFO"

    # DB
    DATABASE_URL: str = "sqlite:///./data/journal.db"
    SQL_ECHO: bool = False

    class Config:
        env_file = ".env"

settings = Settings()
