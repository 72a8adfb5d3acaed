import logging

from config import STUDY_GUIDE_LIMIT, SYSTEM_PROMPT
from errors import MissingCredential, NoTests
from llm_client import call_chat_completion


logger = logging.getLogger(__name__)


def build_prompt(tests, limit: int = STUDY_GUIDE_LIMIT) -> str:
    blocks = []
    for test in tests:
        # hard cut, the marker is added whether or not anything was cut
        guide = test.study_guide[:limit]
        blocks.append(
            f"Test: {test.name}\n"
            f"Date: {test.date}\n"
            f"Study Guide: {guide}..."
        )

    body = "\n\n".join(blocks)
    return (
        "Create a study plan for the following tests:\n\n"
        f"{body}\n\n"
        "Please provide a day-by-day plan leading up to the latest test date."
    )


def build_messages(tests):
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_prompt(tests)},
    ]


def check_preconditions(tests, credential: str):
    if not tests:
        raise NoTests()
    if not credential:
        raise MissingCredential()


def generate_study_plan(tests, credential: str, session=None) -> str:
    check_preconditions(tests, credential)

    logger.info("Requesting study plan for %d test(s)", len(tests))
    plan = call_chat_completion(build_messages(tests), credential, session=session)
    return plan
