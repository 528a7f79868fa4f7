import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env once, globally
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(env_key: str, default: bool = False) -> bool:
    """
    Read a boolean flag from ENV.
    Unset or empty values fall back to the default.
    """
    value = os.getenv(env_key)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    # Read only the first line of a paste, like the original console tool.
    single_line: bool = False
    # Line (compared stripped) that ends a multi-line paste.
    end_marker: str = ""
    verbose: bool = False


def load_settings() -> Settings:
    return Settings(
        single_line=env_flag("CONTRACT_EXTRACTOR_SINGLE_LINE"),
        end_marker=os.getenv("CONTRACT_EXTRACTOR_END_MARKER", "").strip(),
        verbose=env_flag("CONTRACT_EXTRACTOR_VERBOSE"),
    )
