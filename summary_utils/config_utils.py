import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

import streamlit as st

logger = logging.getLogger(__name__)

API_KEY_NAME = "GEMINI_API_KEY"
GEMINI_MODEL = "gemini-2.5-flash-preview-05-20"
API_URL_TEMPLATE = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
MAX_ATTEMPTS = 5


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    model: str = GEMINI_MODEL
    max_attempts: int = MAX_ATTEMPTS

    @property
    def endpoint(self) -> str:
        return API_URL_TEMPLATE.format(model=self.model)


def _secret_value(secrets: Optional[Mapping]) -> Optional[str]:
    if secrets is not None:
        value = secrets.get(API_KEY_NAME)
        return value if isinstance(value, str) else None
    try:
        value = st.secrets.get(API_KEY_NAME)
    except Exception as e:
        # st.secrets raises when no secrets.toml exists
        logger.debug(f"No Streamlit secrets available: {e}")
        return None
    return value if isinstance(value, str) else None


def resolve_api_key(secrets: Optional[Mapping] = None) -> Optional[str]:
    """
    Find the Gemini key: the GEMINI_API_KEY environment variable wins,
    then st.secrets (or the mapping passed in).
    """
    key = os.getenv(API_KEY_NAME) or _secret_value(secrets)
    return key.strip() if key and key.strip() else None


def load_settings(secrets: Optional[Mapping] = None) -> Settings:
    return Settings(api_key=resolve_api_key(secrets))
