import pytest

from controller import PlannerController
from fakes import FakeSession, plan_response
from planner_state import PlannerState


@pytest.fixture
def state():
    return PlannerState()


@pytest.fixture
def controller(state):
    ctrl = PlannerController(state=state, session=FakeSession(plan_response()))
    yield ctrl
    ctrl.shutdown()
