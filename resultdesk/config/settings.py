from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


@dataclass(frozen=True)
class Settings:
    web_mode: bool = os.getenv("RESULTDESK_WEB", "0") == "1"
    port: int = int(os.getenv("PORT", "8550"))
    app_title: str = os.getenv("RESULTDESK_TITLE", "University Result Management")
    log_level: str = os.getenv("RESULTDESK_LOG_LEVEL", "INFO").upper()


settings = Settings()
