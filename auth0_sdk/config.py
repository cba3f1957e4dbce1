from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    domain: str = ""
    management_token: str = ""
    client_id: str = ""
    client_secret: str = ""
    timeout: float = 10.0
    log_format: str = "text"
    log_level: str = "WARNING"

    model_config = {
        "env_prefix": "AUTH0_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
