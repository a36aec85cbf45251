import os
import json
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pydantic import field_validator

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
env_path = os.path.join(project_root, '.env')
load_dotenv(env_path)


class Settings(BaseSettings):
    # Basic settings
    API_PREFIX: str = ""
    PROJECT_NAME: str = "Sporting Team Service"
    VERSION: str = "0.1.0"

    # CORS settings
    # Union keeps comma separated values from failing the JSON decode
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:5173", "http://localhost:8080"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def split_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, list):
            return v
        if v.lstrip().startswith("["):
            return json.loads(v)
        return [origin.strip() for origin in v.split(",") if origin.strip()]

    # Database settings
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_USER: str = "root"
    DB_PASSWORD: str = "password"
    DB_NAME: str = "sporting"

    # Full URI override, e.g. sqlite:///./sporting.db
    DATABASE_URI: Optional[str] = None

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """
        Resolve the database URI, MySQL unless DATABASE_URI is set
        """
        if self.DATABASE_URI:
            return self.DATABASE_URI

        return f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # Create missing tables on startup
    CREATE_TABLES: bool = True
    SQL_ECHO: bool = False

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    RELOAD: bool = False

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    class Config:
        case_sensitive = True
        env_file = ".env"


settings = Settings()
