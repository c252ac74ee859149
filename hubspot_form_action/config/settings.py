from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # HubSpot plugin options
    HUBSPOT_ACCESS_TOKEN: str | None = None
    HUBSPOT_PORTALID: str | None = None
    HUBSPOT_CONSENTTOPROCESS: str | None = None

    # Consent options 1..5: subscription type id + display text
    HUBSPOT_CONSENT_OPTION_1_ID: str | None = None
    HUBSPOT_CONSENT_OPTION_1_TEXT: str | None = None
    HUBSPOT_CONSENT_OPTION_2_ID: str | None = None
    HUBSPOT_CONSENT_OPTION_2_TEXT: str | None = None
    HUBSPOT_CONSENT_OPTION_3_ID: str | None = None
    HUBSPOT_CONSENT_OPTION_3_TEXT: str | None = None
    HUBSPOT_CONSENT_OPTION_4_ID: str | None = None
    HUBSPOT_CONSENT_OPTION_4_TEXT: str | None = None
    HUBSPOT_CONSENT_OPTION_5_ID: str | None = None
    HUBSPOT_CONSENT_OPTION_5_TEXT: str | None = None

    # Endpoints
    HUBSPOT_BASE_URL: str = "https://api.hubapi.com"
    HUBSPOT_FORMS_BASE_URL: str = "https://api.hsforms.com"

    # Content lookup for post_id
    WORDPRESS_BASE_URL: str | None = None
    CONTENT_INDEX_PATH: str | None = None

    # Runtime
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    PORT: int = 8099

    HTTP_TIMEOUT_S: int = 30
    MAX_RETRIES: int = 3

settings = Settings()
