import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    APP_TITLE: str = os.getenv("APP_TITLE", "Employee Management")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8081"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "employee_admin")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "employee_pass")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "employee_management")
    POSTGRES_HOST: str = os.getenv("POSTGRES_HOST", "localhost")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")

    @property
    def DATABASE_URL(self) -> str:
        explicit = os.getenv("DATABASE_URL")
        if explicit:
            return explicit

        # SQLite mode (no Postgres / no Docker)
        sqlite_path = os.getenv("SQLITE_PATH", "employee_management.db")
        use_sqlite = os.getenv("USE_SQLITE", "1") == "1"

        if use_sqlite:
            return f"sqlite+aiosqlite:///{sqlite_path}"

        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )


settings = Settings()
