# dreamlog/core/models/data_models.py

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import FrozenSet, Optional, Tuple
from datetime import date, datetime, time
from enum import Enum


class TechniqueOutcome(str, Enum):
    UNATTEMPTED = "unattempted"
    FAILED = "failed"
    PARTIAL_LUCID = "partial_lucid"
    FULL_LUCID = "full_lucid"


# Dream Models
class DreamRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    created_at: datetime
    title: str = ""
    content: str = ""
    tags: FrozenSet[str] = frozenset()
    is_lucid: bool = False
    dream_sign: Optional[str] = None

    @field_validator('tags', mode='before')
    @classmethod
    def normalize_tags(cls, v):
        if v is None:
            return frozenset()
        if isinstance(v, str):
            v = v.split(',')
        if not isinstance(v, (list, tuple, set, frozenset)):
            raise ValueError('tags must be a list of strings')
        if not all(isinstance(tag, str) for tag in v):
            raise ValueError('every tag must be a string')
        return frozenset(tag.strip() for tag in v if tag.strip())

    @field_validator('dream_sign')
    @classmethod
    def blank_sign_is_absent(cls, v):
        if v is not None and not v.strip():
            return None
        return v.strip() if v is not None else v

    @property
    def dream_date(self) -> date:
        return self.created_at.date()


# Daily Log Models
class DailyLog(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: date
    bedtime: time
    wake_time: time
    quality: int = Field(..., ge=1, le=5)
    wake_feeling: Optional[str] = None
    reality_checks: int = Field(0, ge=0)
    notes: Optional[str] = None
    dream_ids: Tuple[int, ...] = ()
    wbtb_alarm_used: Optional[int] = None


# Technique Models
class TechniquePractice(BaseModel):
    model_config = ConfigDict(frozen=True)

    technique: str
    date: date
    duration_minutes: int = Field(0, ge=0)
    outcome: TechniqueOutcome = TechniqueOutcome.UNATTEMPTED
    control_level: Optional[int] = Field(None, ge=1, le=5)

    @field_validator('technique')
    @classmethod
    def normalize_technique(cls, v):
        v = v.strip().upper()
        if not v:
            raise ValueError('Technique name must not be empty')
        return v

    @model_validator(mode='after')
    def control_level_needs_full_lucidity(self):
        if self.control_level is not None and self.outcome != TechniqueOutcome.FULL_LUCID:
            raise ValueError('Control level is only recorded for full lucid outcomes')
        return self


class JournalSnapshot(BaseModel):
    """Point-in-time copy of the journal handed to the analytics engine"""
    model_config = ConfigDict(frozen=True)

    dreams: Tuple[DreamRecord, ...] = ()
    daily_logs: Tuple[DailyLog, ...] = ()
    technique_practices: Tuple[TechniquePractice, ...] = ()
