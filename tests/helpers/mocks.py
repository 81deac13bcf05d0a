"""Mock HTTP responses for client tests."""

import json


class MockResponse:
    """Mock ``requests.Response``."""

    def __init__(self, status_code=200, json_data=None, text=None):
        self.status_code = status_code
        if text is None:
            text = json.dumps(json_data if json_data is not None else {})
        self.text = text

    def json(self):
        return json.loads(self.text)
