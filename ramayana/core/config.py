from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Ramayana Reader"
    ENV: str = "local"
    DATA_DIR: str = "./data"

    # bundled document
    # Backends:
    # - dir: reads BUNDLE_RESOURCE from DATA_DIR
    # - package: reads BUNDLE_RESOURCE shipped inside BUNDLE_PACKAGE
    # - memory: nothing bundled, the embedded sample is always used
    BUNDLE_BACKEND: str = "package"  # dir|package|memory
    BUNDLE_PACKAGE: str = "ramayana.data"
    BUNDLE_RESOURCE: str = "ramayana_data.json"

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
