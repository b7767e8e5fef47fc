"""
Dashboard Session

State shown by the dashboard and the toast notifications raised while a
user action runs.
"""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any, Deque

from ...domain.entities.image_analysis import ImageAnalysisResult
from ...domain.entities.drug_record import FdaRecord


class NotificationLevel(Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Notification:
    """A transient toast message."""

    level: NotificationLevel
    message: str
    created_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level.value,
            "message": self.message,
            "created_at": self.created_at.isoformat(),
        }


class NotificationCenter:
    """Bounded queue of notifications waiting to be shown."""

    def __init__(self, max_size: int = 50):
        self._queue: Deque[Notification] = deque(maxlen=max_size)

    def success(self, message: str) -> None:
        self._queue.append(Notification(NotificationLevel.SUCCESS, message))

    def error(self, message: str) -> None:
        self._queue.append(Notification(NotificationLevel.ERROR, message))

    def info(self, message: str) -> None:
        self._queue.append(Notification(NotificationLevel.INFO, message))

    def peek(self) -> List[Notification]:
        return list(self._queue)

    def drain(self) -> List[Notification]:
        """Return and forget all pending notifications."""
        items = list(self._queue)
        self._queue.clear()
        return items

    def __len__(self) -> int:
        return len(self._queue)


@dataclass
class SessionState:
    """
    Dashboard state for the single active user.

    Attributes:
        search_query: Text currently in the search box
        selected_medicine: Medicine whose information is displayed
        image_analysis: Result of the last image capture, if any
        fda_record: Label record currently displayed, if any
        generated_explanation: Text from the generation step, if any
        is_loading: Lookup of the label record in progress
        is_analyzing: Image analysis in progress
        is_generating: Explanation generation in progress
    """

    search_query: str = ""
    selected_medicine: str = ""
    image_analysis: Optional[ImageAnalysisResult] = None
    fda_record: Optional[FdaRecord] = None
    generated_explanation: Optional[str] = None
    is_loading: bool = False
    is_analyzing: bool = False
    is_generating: bool = False
    notifications: NotificationCenter = field(default_factory=NotificationCenter)

    def clear_selection(self) -> None:
        """Forget the displayed medicine and everything derived from it."""
        self.selected_medicine = ""
        self.image_analysis = None
        self.generated_explanation = None
        self.is_generating = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "searchQuery": self.search_query,
            "selectedMedicine": self.selected_medicine,
            "imageAnalysis": self.image_analysis.to_dict() if self.image_analysis else None,
            "fdaData": self.fda_record.to_dict() if self.fda_record else None,
            "generatedExplanation": self.generated_explanation,
            "isLoading": self.is_loading,
            "isAnalyzing": self.is_analyzing,
            "isGenerating": self.is_generating,
        }
