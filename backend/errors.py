import json


class PlannerError(Exception):
    """Base class for failures that end up in the error banner."""

    message = "Something went wrong."

    def __init__(self, message: str = None):
        super().__init__(message or self.message)

    def user_message(self) -> str:
        return str(self)


class InvalidFileType(PlannerError):
    message = "Please upload a valid PDF file."


class ExtractionFailed(PlannerError):
    message = "Failed to extract text from PDF."


class NoTests(PlannerError):
    message = "Please add at least one test before generating a study plan."


class MissingCredential(PlannerError):
    message = "Please enter your OpenAI API key."


class ApiError(PlannerError):
    """
    Completion API failure. `status` is None when the request never got a
    response, `body` is the parsed JSON error body or the raw text.
    """

    def __init__(self, detail: str, status: int = None, body=None):
        self.status = status
        self.body = body
        super().__init__(detail)

    @classmethod
    def from_response(cls, status: int, body):
        if isinstance(body, (dict, list)):
            shown = json.dumps(body)
        else:
            shown = body
        return cls(f"API Error: {status} - {shown}", status=status, body=body)

    def user_message(self) -> str:
        return f"Error generating study plan: {self}. Please check your API key and try again."
