import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Library capacities
    max_book_capacity: int = int(os.getenv("LIBRARY_MAX_BOOK_CAPACITY", "100"))
    max_borrowed_books: int = int(os.getenv("LIBRARY_MAX_BORROWED_BOOKS", "3"))
    max_patron_capacity: int = int(os.getenv("LIBRARY_MAX_PATRON_CAPACITY", "50"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    debug: bool = _env_flag("DEBUG")

    # Application
    app_name: str = os.getenv("APP_NAME", "Genre Library")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    environment: str = os.getenv("ENVIRONMENT", "development")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    def to_dict(self) -> dict:
        return {
            "app_name": self.app_name,
            "app_version": self.app_version,
            "environment": self.environment,
            "max_book_capacity": self.max_book_capacity,
            "max_borrowed_books": self.max_borrowed_books,
            "max_patron_capacity": self.max_patron_capacity,
            "log_level": self.effective_log_level,
        }


settings = Settings()
