from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_COMPONENT_CATEGORIES: dict[str, list[str]] = {
    "cpu": ["MICRO"],
    "motherboard": ["MOTHE"],
    "ram": ["MEDIM"],
    "gpu": ["VIDEO"],
    "psu": ["FUENT"],
    "case": ["GABIN"],
    "storage": ["DDURI"],
    "cooling": ["ENFRI"],
}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    app_name: str = "PC Builder"
    debug: bool = False
    env: str = "development"

    # Server
    backend_host: str = "0.0.0.0"
    backend_port: int = 8000

    # PostgreSQL (hosted catalog)
    postgres_user: str = "postgres"
    postgres_password: str = "changeme"
    postgres_db: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    database_url_override: str | None = Field(default=None, alias="DATABASE_URL")
    db_pool_size: int = 5
    db_max_overflow: int = 10

    # Catalog taxonomy: component kind -> catalog category ids
    component_categories: dict[str, list[str]] = Field(
        default_factory=lambda: {
            kind: list(ids) for kind, ids in DEFAULT_COMPONENT_CATEGORIES.items()
        }
    )

    # Pricing
    profit_margin: float = 1.20
    iva_rate: float = 0.08
    software_iva_rate: float = 0.16
    software_category_id: str = "SOFTW"
    price_step: int = 5

    # Quotations
    quotation_validity_days: int = 7
    store_name: str = "Compusistemas de Chiapas"
    store_phone: str = "961-145-3697"
    store_url: str = "compuchiapas.lovable.app"
    store_location: str = "Tuxtla Gutiérrez, Chiapas"

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
