# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load library-wide defaults from environment variables /
#   .env file. Provides a typed config object to the store
#   and the serialization adapter.
#
# CLASSES:
# --------
# - StoreConfig (dataclass)
#     xml_encoding: str       (default "UTF-8")
#     stream_encoding: str    (default "latin-1")
#     list_value_width: int   (default 40)
#
# FUNCTIONS:
# ----------
# - get_config() -> StoreConfig
#     Load .env using python-dotenv, construct StoreConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Forget the singleton so the next get_config() re-reads
#     the environment.
#
# USAGE:
# ------
#   from ordered_properties.config import get_config
#   config = get_config()
#   print(config.xml_encoding)
#
# ==============================================

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv


@dataclass
class StoreConfig:
    """Defaults used by ordered stores when the caller does not pass them."""
    xml_encoding: str = "UTF-8"
    stream_encoding: str = "latin-1"
    list_value_width: int = 40


# Singleton instance
_config_instance: Optional[StoreConfig] = None


def get_config() -> StoreConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        StoreConfig: Library configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load the nearest .env file, looking upwards from the working directory
    load_dotenv(dotenv_path=find_dotenv(usecwd=True))

    _config_instance = StoreConfig(
        xml_encoding=os.getenv("ORDERED_PROPERTIES_XML_ENCODING", "UTF-8"),
        stream_encoding=os.getenv("ORDERED_PROPERTIES_STREAM_ENCODING", "latin-1"),
        list_value_width=int(os.getenv("ORDERED_PROPERTIES_LIST_VALUE_WIDTH", "40"))
    )

    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration."""
    global _config_instance
    _config_instance = None
