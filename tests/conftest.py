from unittest.mock import patch

import pytest

from botcommands.conf import settings


@pytest.fixture(autouse=True)
def mock_settings():
    """Fixture to pin the bot handle used when none is given."""
    with patch.object(settings, "BOT_NAME", "bot"):
        yield settings
