"""CLI defaults, optionally supplied through the environment or a local .env file."""

import os

from dotenv import find_dotenv, load_dotenv

from botsniff.detectors.base import Confidence
from botsniff.exceptions import ConfigError

OUTPUT_FORMATS = ("text", "json")

ENV_FORMAT = "BOTSNIFF_FORMAT"
ENV_MIN_CONFIDENCE = "BOTSNIFF_MIN_CONFIDENCE"


def load_env() -> None:
    # real environment variables win over .env
    load_dotenv(find_dotenv(usecwd=True), override=False)


def default_format() -> str:
    return os.getenv(ENV_FORMAT, "text")


def default_min_confidence() -> str:
    return os.getenv(ENV_MIN_CONFIDENCE, "low")


def parse_format(value: str) -> str:
    fmt = (value or "").strip().lower()
    if fmt not in OUTPUT_FORMATS:
        raise ConfigError(f"unknown format: {value}")
    return fmt


def parse_min_confidence(value) -> Confidence:
    return Confidence.parse(value)
