import threading
from dataclasses import dataclass, field
from typing import List, Optional


DRAFT_FIELDS = ("name", "date", "study_guide")


@dataclass(frozen=True)
class TestEntry:
    name: str
    date: str
    study_guide: str


@dataclass
class DraftTest:
    name: str = ""
    date: str = ""
    study_guide: str = ""

    def is_complete(self) -> bool:
        # exact-empty check, whitespace counts as content
        return bool(self.name and self.date and self.study_guide)

    def reset(self):
        self.name = ""
        self.date = ""
        self.study_guide = ""

    def to_entry(self) -> TestEntry:
        return TestEntry(name=self.name, date=self.date, study_guide=self.study_guide)


@dataclass
class PlannerState:
    """
    Everything the page shows for one session.

    Callers go through the methods below so that each update happens under
    the lock; background jobs and the Streamlit script thread share one
    instance.
    """

    tests: List[TestEntry] = field(default_factory=list)
    draft: DraftTest = field(default_factory=DraftTest)
    credential: str = field(default="", repr=False)
    study_plan: Optional[str] = None
    error: Optional[str] = None
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def edit_draft(self, name: str, value: str):
        if name not in DRAFT_FIELDS:
            raise KeyError(f"Unknown draft field: {name}")
        with self._lock:
            setattr(self.draft, name, value or "")

    def set_credential(self, value: str):
        with self._lock:
            self.credential = value or ""

    def commit_draft(self) -> bool:
        with self._lock:
            if not self.draft.is_complete():
                return False
            self.tests.append(self.draft.to_entry())
            self.draft.reset()
            return True

    def set_study_guide(self, text: str):
        with self._lock:
            self.draft.study_guide = text
            self.error = None

    def set_plan(self, plan: str):
        with self._lock:
            self.study_plan = plan
            self.error = None

    def set_error(self, message: str):
        with self._lock:
            self.error = message

    def snapshot(self):
        """Tests and credential as they are right now, for a background job."""
        with self._lock:
            return tuple(self.tests), self.credential
