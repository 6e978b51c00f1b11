# dreamlog/core/models/output_models.py

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import date
from enum import Enum


class ReportModel(BaseModel):
    """Base model for read-only report values"""
    model_config = ConfigDict(frozen=True)


class FrequencyEntry(ReportModel):
    """A ranked term and how often it occurred"""
    term: str
    count: int = Field(..., ge=1)


class PeriodCount(ReportModel):
    """Dream counts for one day, ISO week or month"""
    period: str
    total: int = Field(..., ge=0)
    lucid: int = Field(..., ge=0)


class DreamStatistics(ReportModel):
    total_dreams: int = 0
    lucid_dreams: int = 0
    lucid_percentage: float = Field(0.0, ge=0.0, le=100.0)
    dream_days: int = 0
    lucid_dream_days: int = 0
    lucidity_rate: Optional[float] = Field(None, ge=0.0, le=1.0)
    total_words: int = 0
    average_words_per_dream: Optional[float] = None
    daily_counts: List[PeriodCount] = []
    weekly_counts: List[PeriodCount] = []
    monthly_counts: List[PeriodCount] = []
    common_dream_signs: List[FrequencyEntry] = []
    longest_journal_streak: int = 0


class RecentDreamSummary(ReportModel):
    """Dream activity over the days leading up to the reference date"""
    start_date: date
    end_date: date
    dream_count: int = 0
    lucid_count: int = 0
    total_words: int = 0


class NightlySleep(ReportModel):
    date: date
    duration_hours: float
    quality: int


class QualityLucidityBucket(ReportModel):
    """Lucidity rate on dream-days logged with a given sleep quality"""
    quality: int = Field(..., ge=1, le=5)
    dream_days: int = 0
    lucid_days: int = 0
    lucidity_rate: Optional[float] = Field(None, ge=0.0, le=1.0)


class SleepStatistics(ReportModel):
    logged_nights: int = 0
    average_duration_hours: Optional[float] = None
    min_duration_hours: Optional[float] = None
    max_duration_hours: Optional[float] = None
    average_quality: Optional[float] = None
    nightly_durations: List[NightlySleep] = []
    quality_vs_lucidity: List[QualityLucidityBucket] = []
    lucid_nights: int = 0
    lucid_night_rate: Optional[float] = Field(None, ge=0.0, le=1.0)
    average_quality_on_lucid_nights: Optional[float] = None


class DayCount(ReportModel):
    date: date
    count: int


class RealityCheckSummary(ReportModel):
    total: int = 0
    logged_days: int = 0
    average_per_day: float = 0.0
    most_active: Optional[DayCount] = None
    least_active: Optional[DayCount] = None
    longest_streak: int = 0


class DayStatus(str, Enum):
    NO_ENTRY = "no_entry"
    DREAM = "dream"
    LUCID = "lucid"


class CalendarDay(ReportModel):
    date: date
    status: DayStatus = DayStatus.NO_ENTRY
    dream_count: int = 0


class MonthCalendar(ReportModel):
    """One entry per day of the month, without padding cells"""
    year: int
    month: int = Field(..., ge=1, le=12)
    first_weekday: int = Field(..., ge=0, le=6)
    days: List[CalendarDay]


class TechniqueStats(ReportModel):
    technique: str
    attempts: int = Field(..., ge=1)
    successes: int = Field(..., ge=0)
    success_rate: float = Field(..., ge=0.0, le=100.0)
    last_practiced: date
    average_control_level: Optional[float] = None
    total_minutes: int = 0
    recommendation: str


class StatisticsReport(ReportModel):
    """Complete statistics computed from one journal snapshot"""
    reference_date: date
    top_n: int
    dream_statistics: DreamStatistics
    word_frequencies: List[FrequencyEntry] = []
    recent_dreams: RecentDreamSummary
    sleep_statistics: SleepStatistics
    reality_checks: RealityCheckSummary
    calendar: MonthCalendar
    technique_effectiveness: List[TechniqueStats] = []
    best_technique: Optional[str] = None
    worst_technique: Optional[str] = None
