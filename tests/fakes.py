import json
from concurrent.futures import Future

import fitz


class FakeUpload:
    def __init__(self, data: bytes, type: str = "application/pdf", name: str = "guide.pdf"):
        self.data = data
        self.type = type
        self.name = name

    def getvalue(self):
        return self.data


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else json.dumps(body)

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._body is None:
            return json.loads(self.text)
        return self._body


class FakeSession:
    """Records every post and answers with the queued responses in order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def post(self, url, headers=None, json=None):
        self.calls.append({"url": url, "headers": headers, "json": json})
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response


def make_pdf(text: str) -> bytes:
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


def plan_response(content="Day 1: review..."):
    return FakeResponse(200, {"choices": [{"message": {"role": "assistant", "content": content}}]})


class LatinOnlySession(FakeSession):
    """Encodes headers the way http.client does before sending."""

    def post(self, url, headers=None, json=None):
        for value in headers.values():
            value.encode("latin-1")
        return super().post(url, headers=headers, json=json)


class SyncExecutor:
    """Runs jobs on the calling thread so page tests see results on the same rerun."""

    def submit(self, fn, *args):
        future = Future()
        future.set_result(fn(*args))
        return future

    def shutdown(self, wait=True):
        pass
