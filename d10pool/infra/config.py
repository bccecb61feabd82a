"""Engine configuration via Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Success counting
    default_target_number: int = 7
    default_double: int = 10

    # Rerolls
    max_cascade_depth: int = Field(256, ge=1)  # reroll passes, the first one included

    model_config = {
        "env_prefix": "D10POOL_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


settings = Settings()
