import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SHEET_RANGE = "Sales!A1:D500"
DEFAULT_MODEL = "gpt-4o-mini"


@dataclass(frozen=True)
class Settings:
    service_account_json: Optional[str] = None
    sheet_id: Optional[str] = None
    sheet_range: str = DEFAULT_SHEET_RANGE
    openai_api_key: Optional[str] = None
    openai_model: str = DEFAULT_MODEL
    openai_timeout: float = 30.0
    port: int = 8080

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        return cls(
            service_account_json=env.get("GOOGLE_SERVICE_ACCOUNT_JSON") or env.get("GOOGLE_SERVICE_ACCOUNT"),
            sheet_id=env.get("SHEET_ID") or None,
            sheet_range=env.get("SHEET_RANGE") or DEFAULT_SHEET_RANGE,
            openai_api_key=env.get("OPENAI_API_KEY") or None,
            openai_model=env.get("OPENAI_MODEL") or DEFAULT_MODEL,
            openai_timeout=float(env.get("OPENAI_TIMEOUT") or 30),
            port=int(env.get("PORT") or 8080),
        )
