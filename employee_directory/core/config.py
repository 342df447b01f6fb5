# employee_directory/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

DEFAULT_CSP = (
    "default-src 'self' https://unpkg.com https://cdn.tailwindcss.com https://cdnjs.cloudflare.com; "
    "script-src 'self' 'unsafe-inline' https://unpkg.com https://cdnjs.cloudflare.com https://cdn.tailwindcss.com; "
    "style-src 'self' 'unsafe-inline' https://cdn.tailwindcss.com https://fonts.googleapis.com; "
    "font-src 'self' https://fonts.gstatic.com data:; "
    "connect-src 'self'; "
    "img-src 'self' data: https://cdn.jsdelivr.net https://cdnjs.cloudflare.com; "
    "frame-ancestors 'self'; "
    "base-uri 'self';"
)

class Settings(BaseSettings):
    APP_NAME: str = "Employee Directory API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Directorio de empleados: alta, listado y borrado masivo."
    API_PREFIX: str = "/api"

    # URL completa de SQLAlchemy; si viene, gana sobre MYSQL_*
    DATABASE_URL: str = ""

    # MySQL
    MYSQL_HOST: str = "localhost"
    MYSQL_PORT: int = 3306
    MYSQL_DB: str = "employee_directory"
    MYSQL_USER: str = "root"
    MYSQL_PASSWORD: str = ""
    MYSQL_CHARSET: str = "utf8mb4"

    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGIN: str = "*"
    CONTENT_SECURITY_POLICY: str = DEFAULT_CSP
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def sqlalchemy_url(self) -> str | None:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if not self.MYSQL_HOST:
            return None
        # URL.create escapa caracteres especiales de usuario y password
        return URL.create(
            "mysql+pymysql",
            username=self.MYSQL_USER,
            password=self.MYSQL_PASSWORD,
            host=self.MYSQL_HOST,
            port=self.MYSQL_PORT,
            database=self.MYSQL_DB,
            query={"charset": self.MYSQL_CHARSET},
        ).render_as_string(hide_password=False)

@lru_cache
def get_settings() -> Settings:
    return Settings()
