# -*- coding: utf-8 -*-
"""
Submission sinks - destinations for a completed form's value store.
"""

import json
from abc import ABC, abstractmethod
from typing import Dict

from models.form_schema import FieldValue
from utils.logger import get_logger

logger = get_logger(__name__)


class SubmissionSink(ABC):
    """Receives the complete value store on successful final submission."""

    @abstractmethod
    def submit(self, values: Dict[str, FieldValue]):
        pass


class LoggingSubmissionSink(SubmissionSink):
    """Stand-in sink that writes the submitted values to the application log."""

    def __init__(self):
        self.submissions = []

    def submit(self, values: Dict[str, FieldValue]):
        self.submissions.append(dict(values))
        logger.info(f"Form Data Submitted: {json.dumps(values, ensure_ascii=False, indent=2)}")
