# dreamlog/core/data/repository.py
import json
import logging
import os

from dreamlog.core.exceptions import MalformedInputError
from dreamlog.core.models.data_models import DailyLog, DreamRecord, JournalSnapshot, TechniquePractice
from dreamlog.utils.data_validation import validate_records

logger = logging.getLogger(__name__)

# Outcome tags written by the original terminal tool
_OUTCOME_TAGS = {
    'Unattempted': 'unattempted',
    'Failed': 'failed',
    'PartialLucid': 'partial_lucid',
    'FullLucid': 'full_lucid',
}


class JournalRepository:
    """Read-only access to the JSON journal files"""

    def __init__(self, data_dir='.', config=None):
        self.config = config or {}
        self.data_dir = data_dir
        self.dreams_file = self.config.get('dreams_file', 'dreams.json')
        self.daily_logs_file = self.config.get('daily_logs_file', 'daily_logs.json')
        self.technique_history_file = self.config.get('technique_history_file', 'technique_history.json')

    def _read_json(self, filename):
        """Load a JSON list, empty when the file does not exist yet"""
        path = os.path.join(self.data_dir, filename)
        if not os.path.exists(path):
            logger.info(f"{path} not found, treating as empty")
            return []

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedInputError(path, f"invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise MalformedInputError(path, "expected a JSON list of records")
        return data

    @staticmethod
    def _dream_fields(item):
        """Map a stored dream onto DreamRecord fields"""
        if not isinstance(item, dict):
            return item
        fields = dict(item)
        if 'created_at' not in fields and 'date' in fields:
            fields['created_at'] = fields.pop('date')
        if 'is_lucid' not in fields:
            lucid = fields.pop('lucid', None)
            tags = fields.get('tags')
            fields['is_lucid'] = bool(lucid) or (isinstance(tags, (list, tuple)) and '#lucid' in tags)
        return fields

    @staticmethod
    def _log_fields(item):
        """Flatten the nested sleep / dream entries of a stored daily log"""
        if not isinstance(item, dict):
            return item
        fields = dict(item)
        sleep = fields.pop('sleep', None)
        if isinstance(sleep, dict):
            fields.setdefault('bedtime', sleep.get('bedtime'))
            fields.setdefault('wake_time', sleep.get('wake_time'))
            fields.setdefault('quality', sleep.get('quality'))
        dream = fields.pop('dream', None)
        if isinstance(dream, dict) and 'id' in dream and 'dream_ids' not in fields:
            fields['dream_ids'] = [dream['id']]
        fields.pop('technique_practice', None)
        if not fields.get('notes'):
            fields['notes'] = None
        return fields

    @staticmethod
    def _practice_fields(item):
        """Unpack the tagged outcome of a stored technique practice"""
        if not isinstance(item, dict):
            return item
        fields = dict(item)
        outcome = fields.get('outcome')
        if isinstance(outcome, dict):
            tag = outcome.get('type')
            fields['outcome'] = _OUTCOME_TAGS.get(tag, tag) if isinstance(tag, str) else tag
            data = outcome.get('data')
            if isinstance(data, dict) and 'control_level' in data:
                fields.setdefault('control_level', data['control_level'])
        elif isinstance(outcome, str):
            fields['outcome'] = _OUTCOME_TAGS.get(outcome, outcome)
        return fields

    def get_dreams(self):
        items = [self._dream_fields(item) for item in self._read_json(self.dreams_file)]
        return validate_records(items, DreamRecord, key_field='id')

    def get_daily_logs(self):
        items = [self._log_fields(item) for item in self._read_json(self.daily_logs_file)]
        return validate_records(items, DailyLog, key_field='date')

    def get_technique_practices(self):
        items = [self._practice_fields(item) for item in self._read_json(self.technique_history_file)]
        return validate_records(items, TechniquePractice, key_field='date')

    def load_snapshot(self):
        """Read all journal files into one consistent snapshot"""
        snapshot = JournalSnapshot(
            dreams=self.get_dreams(),
            daily_logs=self.get_daily_logs(),
            technique_practices=self.get_technique_practices(),
        )
        logger.info(
            f"Loaded {len(snapshot.dreams)} dreams, {len(snapshot.daily_logs)} daily logs "
            f"and {len(snapshot.technique_practices)} technique practices from {self.data_dir}"
        )
        return snapshot
