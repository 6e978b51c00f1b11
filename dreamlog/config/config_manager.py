# dreamlog/config/config_manager.py
from datetime import date
from typing import FrozenSet, Optional
import logging

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from dreamlog.core.exceptions import ConfigurationError
from dreamlog.utils.constants import STOP_WORDS, default_values

logger = logging.getLogger(__name__)


class ConfigManager:
    """Central configuration manager"""

    def __init__(self, config_path=None):
        self.config_path = config_path or 'config/report_config.yaml'
        self.config = self._load_config()

    def _load_config(self):
        """Load configuration from file"""
        try:
            with open(self.config_path, 'r') as file:
                config = yaml.safe_load(file)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Could not load configuration from {self.config_path}: {e}") from e
        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ConfigurationError(f"Configuration in {self.config_path} must be a mapping")
        return config

    def get(self, key, default=None):
        """Get configuration value"""
        # Support nested keys with dot notation
        keys = key.split('.')
        value = self.config
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def report_config(self, **overrides):
        """Build a ReportConfig from the `report` section plus overrides."""
        section = self.get('report', {}) or {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"'report' section in {self.config_path} must be a mapping")
        options = dict(section)
        options.update({k: v for k, v in overrides.items() if v is not None})
        return ReportConfig.from_options(**options)


class ReportConfig(BaseModel):
    """Options accepted per report request"""
    model_config = ConfigDict(frozen=True, extra='forbid')

    top_n: int = Field(default_values['top_n'], gt=0)
    year: Optional[int] = Field(None, ge=1, le=9999)
    month: Optional[int] = Field(None, ge=1, le=12)
    reference_date: Optional[date] = None
    stop_words: FrozenSet[str] = STOP_WORDS
    include_titles: bool = False
    min_word_length: int = Field(default_values['min_word_length'], gt=0)
    recent_days: int = Field(default_values['recent_days'], gt=0)

    @field_validator('stop_words', mode='before')
    @classmethod
    def normalize_stop_words(cls, v):
        if v is None:
            return STOP_WORDS
        if not isinstance(v, (list, tuple, set, frozenset)):
            raise ValueError('stop_words must be a list of words')
        return frozenset(str(word).strip().lower() for word in v)

    @model_validator(mode='after')
    def year_needs_month(self):
        if self.year is not None and self.month is None:
            raise ValueError('A calendar year requires a month')
        return self

    @classmethod
    def from_options(cls, **options):
        """Validate options, raising ConfigurationError instead of ValidationError."""
        try:
            return cls(**options)
        except ValidationError as e:
            logger.error(f"Invalid report configuration: {e}")
            raise ConfigurationError(f"Invalid report configuration: {e}") from e

    def resolve_reference_date(self):
        return self.reference_date or date.today()

    def resolve_period(self):
        """Calendar (year, month), defaulting to the reference date's month."""
        reference = self.resolve_reference_date()
        return self.year or reference.year, self.month or reference.month
