from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    database_url: str = "sqlite:///./zen_focus.db"
    sql_echo: bool = False

    # Ключ слота, в котором хранится коллекция документов
    storage_key: str = "zen-focus-documents"

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
