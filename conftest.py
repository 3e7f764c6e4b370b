import pytest


class RecordingCanvas:
    """Stands in for tk.Canvas; records create_* calls."""

    def __init__(self):
        self.calls = []

    def create_rectangle(self, *coords, **kw):
        self.calls.append(("rectangle", coords, kw))
        return len(self.calls)

    def create_oval(self, *coords, **kw):
        self.calls.append(("oval", coords, kw))
        return len(self.calls)

    def delete(self, tag):
        if tag == "all":
            self.calls.clear()

    def items(self, shape):
        return [c for c in self.calls if c[0] == shape]


@pytest.fixture
def canvas():
    return RecordingCanvas()
