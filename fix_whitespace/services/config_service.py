"""Runtime configuration read from the environment or an explicit .env file."""
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import dotenv_values

STRICT_CONTRACT_ENV = "FIX_WHITESPACE_STRICT_CONTRACT"
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_flag(raw_value: Optional[str]) -> bool:
    """Interpret a setting value; unset or empty means True."""
    raw_value = (raw_value or "").strip().lower()
    if not raw_value:
        return True

    return raw_value not in _FALSE_VALUES


def is_strict_contract() -> bool:
    """
    Check whether the segments/values length contract is enforced.

    Returns:
        False if FIX_WHITESPACE_STRICT_CONTRACT is 0/false/no/off, True otherwise

    Behavior:
        - Reads the process environment only; no files are touched
        - Defaults to True when the variable is unset or empty
    """
    return _parse_flag(os.getenv(STRICT_CONTRACT_ENV))


def strict_contract_from_file(env_path: Union[str, Path] = ".env") -> bool:
    """
    Read the strict contract setting from a .env file.

    Args:
        env_path: Path to the .env file (default: ".env")

    Returns:
        Parsed setting, True if the file or the key is missing

    Behavior:
        - Never writes to os.environ
        - Meant to be called once by the application, with the result passed
          as normalize_template(..., strict=...)
    """
    env_path = Path(env_path)
    if not env_path.exists():
        return True

    return _parse_flag(dotenv_values(env_path).get(STRICT_CONTRACT_ENV))
