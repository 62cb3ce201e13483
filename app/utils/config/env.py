from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "mission-roles"
    environment: str = "local"
    debug: bool = False
    log_level: str = "INFO"

    mongo_scheme: str = "mongodb"
    mongo_port: int = 27017
    mongo_host: str = "localhost"
    mongo_db: str = "mission_roles"
    mongo_password: str | None = None
    mongo_params: str | None = None
    mongo_user: str | None = None

    role_catalog_path: str | None = None

    git_branch: str = Field(default="unknown", validation_alias="GIT_BRANCH")
    git_commit: str = Field(default="unknown", validation_alias="GIT_COMMIT")

    model_config = SettingsConfigDict(env_file=(".env",), case_sensitive=True, extra="ignore")

    @property
    def mongo_uri(self) -> str:
        auth = ""
        if self.mongo_user and self.mongo_password:
            auth = f"{self.mongo_user}:{self.mongo_password}@"
        params = f"?{self.mongo_params}" if self.mongo_params else ""
        # SRV records carry the port themselves
        if self.mongo_scheme == "mongodb+srv":
            return f"{self.mongo_scheme}://{auth}{self.mongo_host}/{self.mongo_db}{params}"
        return f"{self.mongo_scheme}://{auth}{self.mongo_host}:{self.mongo_port}/{self.mongo_db}{params}"


settings = Settings()
