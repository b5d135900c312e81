import io
import os
import sys
import tempfile

import pytest

# Must be set before config is imported; load_dotenv does not override these
os.environ["GRADER_DEBUG"] = "0"
os.environ["GRADER_LOG_FILE"] = os.path.join(tempfile.mkdtemp(prefix="score-grader-"), "grader_app.log")
os.environ.pop("GRADER_PROMPT", None)


@pytest.fixture
def stdin_text(monkeypatch):
    """Replaces stdin with the given text."""

    def _set(text: str):
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))

    return _set
