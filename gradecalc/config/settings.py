from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _int_env(name: str, default: int, minimum: int = 0) -> int:
    try:
        value = int(os.getenv(name, str(default)))
    except ValueError:
        return default
    return max(minimum, value)


@dataclass(frozen=True)
class Settings:
    web_mode: bool = False
    port: int = 8550

    window_title: str = "Modern Grade Calculator"
    window_width: int = 750
    window_height: int = 600
    initial_rows: int = 1

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            web_mode=os.getenv("GRADECALC_WEB", "0") == "1",
            port=_int_env("PORT", 8550, minimum=1),
            window_title=os.getenv("GRADECALC_TITLE", "Modern Grade Calculator"),
            window_width=_int_env("GRADECALC_WINDOW_WIDTH", 750, minimum=1),
            window_height=_int_env("GRADECALC_WINDOW_HEIGHT", 600, minimum=1),
            initial_rows=_int_env("GRADECALC_INITIAL_ROWS", 1),
            log_level=os.getenv("GRADECALC_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )


settings = Settings.from_env()
