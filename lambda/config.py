import os
from dataclasses import dataclass, field
from functools import lru_cache

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from dotenv import find_dotenv, load_dotenv

from utils import logging

DEFAULT_MODEL = "gemini-2.5-flash-preview-09-2025"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"


@dataclass(frozen=True)
class Settings:
    api_key: str | None = field(default=None, repr=False)
    model: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE
    timeout_seconds: float = 30.0
    port: int = 3000
    cors_allow_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    @property
    def generate_content_url(self) -> str:
        return f"{self.api_base.rstrip('/')}/models/{self.model}:generateContent"


def load_api_key_from_ssm(parameter_name: str, region: str) -> str | None:
    logging.info(f"Loading Gemini API key from SSM parameter {parameter_name}")
    try:
        ssm = boto3.client("ssm", region_name=region)
        response = ssm.get_parameter(Name=parameter_name, WithDecryption=True)
        return response["Parameter"]["Value"]
    except (BotoCoreError, ClientError) as e:
        logging.error(f"Error loading SSM parameter {parameter_name}: {str(e)}")
        return None


def load_environment():
    # .env beside the process, not beside this module
    load_dotenv(find_dotenv(usecwd=True))


def parse_cors_origins(env=None) -> tuple[str, ...]:
    env = os.environ if env is None else env
    origins = tuple(o.strip() for o in env.get("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip())
    return origins or ("*",)


def load_settings(env=None) -> Settings:
    env = os.environ if env is None else env

    api_key = env.get("GEMINI_API_KEY") or None
    parameter_name = env.get("GEMINI_API_KEY_PARAMETER")
    if api_key is None and parameter_name:
        api_key = load_api_key_from_ssm(parameter_name, env.get("AWS_REGION", "us-east-1"))

    return Settings(
        api_key=api_key,
        model=env.get("GEMINI_MODEL", DEFAULT_MODEL),
        api_base=env.get("GEMINI_API_BASE", DEFAULT_API_BASE),
        timeout_seconds=float(env.get("GEMINI_TIMEOUT_SECONDS", "30")),
        port=int(env.get("PORT", "3000")),
        cors_allow_origins=parse_cors_origins(env),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_environment()
    settings = load_settings()
    logging.set_level(settings.log_level)
    return settings
