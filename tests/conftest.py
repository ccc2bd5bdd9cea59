# tests/conftest.py
import os
import sys

# Ensure repository root is on PYTHONPATH for tests
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

# Ensure placeholder secrets do not trigger validators during tests
os.environ.setdefault("OPENAI_API_KEY", "test-key")

import pytest  # noqa: E402
import structlog  # noqa: E402
from core.activity_log import ActivityLog  # noqa: E402
from review_modules import ReviewContext  # noqa: E402

from models import ContentInput, ContentType  # noqa: E402

SAMPLE_ARTICLE_TEXT = """
Artificial Intelligence: Transforming Our World

Introduction
Artificial Intelligence (AI) has become one of the most transformative technologies of the 21st century. From virtual assistants like Siri and Alexa to sophisticated algorithms that power recommendation systems on platforms like Netflix and Amazon, AI is increasingly integrated into our daily lives.

Current Applications of AI
Healthcare: AI algorithms can analyze medical images to detect diseases like cancer often with greater accuracy than human radiologists.
Finance: Banks and financial institutions use AI for fraud detection, algorithmic trading, and customer service chatbots.

Future Possibilities
Quantum computing could exponentially increase AI processing capabilities.
Brain-computer interfaces might allow direct communication between humans and AI systems.

Conclusion
Responsible development and thoughtful regulation are essential to ensure that AI benefits humanity while minimizing potential harms.
"""


class FakeProvider:
    """Completion provider double returning canned text or raising."""

    def __init__(self, response: str = "", error: Exception | None = None):
        self.response = response
        self.error = error
        self.responses: dict[str, str] = {}
        self.calls: list[tuple[str, object]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def generate_completion(self, prompt, options):
        self.calls.append((prompt, options))
        if self.error is not None:
            raise self.error
        for marker, text in self.responses.items():
            if marker in prompt:
                return text
        return self.response


@pytest.fixture(autouse=True)
def structlog_to_stdlib():
    """Route structlog through stdlib logging so stdout stays clean for JSON."""
    structlog.configure(
        processors=[
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.render_to_log_kwargs,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def sample_article() -> ContentInput:
    return ContentInput(
        title="The Future of Artificial Intelligence",
        author="Test Author",
        content=SAMPLE_ARTICLE_TEXT,
        content_type=ContentType.ARTICLE,
        target_audience="General public interested in technology",
        additional_context={
            "purpose": "Educational",
            "publicationPlatform": "Online blog",
        },
    )


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def activity_log() -> ActivityLog:
    return ActivityLog(log_to_console=False)


@pytest.fixture
def review_context(fake_provider, activity_log) -> ReviewContext:
    return ReviewContext(provider=fake_provider, log=activity_log)
