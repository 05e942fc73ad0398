"""Centralized configuration using Pydantic Settings.

The keyword tables the parser relies on live here rather than as literals
scattered through the parsing modules, so they can be inspected, swapped in
tests, or extended through the environment.

Configuration can be overridden via environment variables:
- SEATPLAN_PARSER_PAID_KEYWORDS='["입완", "완납"]'
- SEATPLAN_PALETTE_COLORS='["#000000", "#ffffff"]'
- SEATPLAN_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParserConfig(BaseSettings):
    """Vocabulary used to classify roster lines and tokens.

    Environment variables prefixed with SEATPLAN_PARSER_.
    """

    model_config = SettingsConfigDict(env_prefix="SEATPLAN_PARSER_")

    # Matched as exact token or substring, so "x" also covers "xx".
    unassigned_seat_keywords: tuple[str, ...] = (
        "미정",
        "미배정",
        "아무곳",
        "아무데",
        "아무대",
        "상관없",
        "맘대로",
        "마음대로",
        "임의",
        "임의배정",
        "없음",
        "^^",
        "?",
        "x",
        "X",
    )
    paid_keywords: tuple[str, ...] = ("입완", "입금완료", "완료", "입금됨", "결제완료")
    pending_keywords: tuple[str, ...] = ("예정", "입금예정", "미입금", "대기", "예약")

    video_keywords: tuple[str, ...] = ("youtu.be", "youtube.com", "YouTube", "유튜브")
    account_keywords: tuple[str, ...] = ("카뱅", "계좌")
    boarding_list_keywords: tuple[str, ...] = ("탑승(", "탑승지")
    noise_prefixes: tuple[str, ...] = ("(", "*", "-", "+")


class PaletteConfig(BaseSettings):
    """Colours handed out to boarding locations, in order.

    Environment variables prefixed with SEATPLAN_PALETTE_.
    """

    model_config = SettingsConfigDict(env_prefix="SEATPLAN_PALETTE_")

    colors: tuple[str, ...] = (
        "#e74c3c",
        "#3498db",
        "#2ecc71",
        "#f39c12",
        "#9b59b6",
        "#1abc9c",
        "#e67e22",
        "#34495e",
        "#e91e63",
        "#00bcd4",
        "#8bc34a",
        "#ff5722",
        "#795548",
        "#607d8b",
    )


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with SEATPLAN_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SEATPLAN_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.parser.paid_keywords)
        print(config.observability.level)

    Environment variables prefixed with SEATPLAN_.
    """

    model_config = SettingsConfigDict(env_prefix="SEATPLAN_")

    parser: ParserConfig = Field(default_factory=ParserConfig)
    palette: PaletteConfig = Field(default_factory=PaletteConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
