# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True))


@dataclass(frozen=True)
class Config:
    # Hugging Face feature-extraction service
    hf_token: str
    hf_model_id: str = "sentence-transformers/all-MiniLM-L6-v2"
    hf_api_base: str = "https://api-inference.huggingface.co/pipeline/feature-extraction"

    # Chroma vector store (HTTP when host is set, embedded otherwise)
    vector_store_host: str = ""
    vector_store_port: int = 8000
    vector_store_api_key: str = ""
    vector_store_path: str = "./data/chroma"

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        "hf_token": "HF_TOKEN",
        "hf_model_id": "HF_MODEL_ID",
        "hf_api_base": "HF_API_BASE",
        "vector_store_host": "VECTOR_STORE_HOST",
        "vector_store_port": "VECTOR_STORE_PORT",
        "vector_store_api_key": "VECTOR_STORE_API_KEY",
        "vector_store_path": "VECTOR_STORE_PATH",
    }

    REQUIRED_FIELDS = ("hf_token", "hf_model_id", "hf_api_base")

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables; unset values keep their defaults."""
        kwargs = {}
        for field_name, env_name in Config.ENV_VARS.items():
            value = os.getenv(env_name)
            if value is None or value.strip() == "":
                continue
            value = value.strip()
            if field_name == "vector_store_port":
                try:
                    kwargs[field_name] = int(value)
                except ValueError as e:
                    raise ValueError(f"Env var {env_name} must be an int, got {value!r}") from e
            else:
                kwargs[field_name] = value

        kwargs.setdefault("hf_token", "")
        return Config(**kwargs)

    def __post_init__(self):
        """
        Fail fast if any required config is missing.
        """
        missing_fields = [f for f in self.REQUIRED_FIELDS if not getattr(self, f)]

        if missing_fields:
            missing_env_vars = [self.ENV_VARS[f] for f in missing_fields]
            raise ValueError(f"Missing required environment variables: {missing_env_vars}")

    @property
    def embedding_endpoint(self) -> str:
        return f"{self.hf_api_base.rstrip('/')}/{self.hf_model_id}"

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "hf_model_id": self.hf_model_id,
            "embedding_endpoint": self.embedding_endpoint,
            "vector_store_host": self.vector_store_host or None,
            "vector_store_port": self.vector_store_port,
            "vector_store_path": None if self.vector_store_host else self.vector_store_path,
            "vector_store_api_key_set": bool(self.vector_store_api_key),
        }
