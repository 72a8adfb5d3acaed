import logging

from planner_state import PlannerState


logger = logging.getLogger(__name__)


def add_test(state: PlannerState) -> bool:
    # incomplete drafts are ignored without an error
    accepted = state.commit_draft()
    if accepted:
        logger.info("Added test #%d", len(state.tests))
    return accepted
