import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import NamedTuple, Optional

from config import MAX_WORKERS
from errors import ApiError, ExtractionFailed, InvalidFileType, PlannerError
from extract_text import extract_text, is_pdf
from planner_state import PlannerState
from registry import add_test
from study_planner import check_preconditions, generate_study_plan


logger = logging.getLogger(__name__)


class Outcome(NamedTuple):
    ok: bool
    value: Optional[str] = None
    error: Optional[PlannerError] = None


class PlannerController:
    """
    Routes user actions to the backend and writes results into the state.

    Extraction and plan generation run on a thread pool and return futures
    that resolve to an Outcome once the state has been updated. Jobs are
    never cancelled or serialised, so overlapping generations finish in any
    order and the last one to finish wins.
    """

    def __init__(self, state: PlannerState = None, extractor=None, session=None, executor=None):
        self.state = state or PlannerState()
        self.extractor = extractor
        self.session = session
        self.executor = executor or ThreadPoolExecutor(max_workers=MAX_WORKERS, thread_name_prefix="planner")
        self._jobs = []

    def edit_draft(self, name: str, value: str):
        self.state.edit_draft(name, value)

    def set_credential(self, value: str):
        self.state.set_credential(value)

    def add_test(self) -> bool:
        return add_test(self.state)

    def upload_study_guide(self, file) -> Future:
        if not is_pdf(file):
            return self._fail(InvalidFileType())
        return self._submit(self._run_extraction, file)

    def generate_plan(self) -> Future:
        tests, credential = self.state.snapshot()
        try:
            check_preconditions(tests, credential)
        except PlannerError as e:
            return self._fail(e)
        return self._submit(self._run_generation, tests, credential)

    def pending(self) -> bool:
        self._jobs = [job for job in self._jobs if not job.done()]
        return bool(self._jobs)

    def shutdown(self):
        self.executor.shutdown(wait=True)

    def _fail(self, error: PlannerError) -> Future:
        done = Future()
        done.set_result(self._settle(error))
        return done

    def _settle(self, error: PlannerError) -> Outcome:
        self.state.set_error(error.user_message())
        return Outcome(ok=False, error=error)

    def _submit(self, fn, *args) -> Future:
        job = self.executor.submit(fn, *args)
        self._jobs.append(job)
        return job

    def _run_extraction(self, file) -> Outcome:
        try:
            text = extract_text(file, extractor=self.extractor)
        except PlannerError as e:
            return self._settle(e)
        except Exception:
            logger.exception("Study guide upload failed")
            return self._settle(ExtractionFailed())
        self.state.set_study_guide(text)
        return Outcome(ok=True, value=text)

    def _run_generation(self, tests, credential) -> Outcome:
        try:
            plan = generate_study_plan(tests, credential, session=self.session)
        except PlannerError as e:
            return self._settle(e)
        except Exception as e:
            logger.exception("Study plan request failed")
            return self._settle(ApiError(str(e)))
        logger.info("Study plan ready (%d characters)", len(plan))
        self.state.set_plan(plan)
        return Outcome(ok=True, value=plan)
