import pytest

from shellcss.config import Settings


@pytest.fixture
def settings():
    # Explicit maps so tests don't depend on the shipped defaults
    return Settings(
        base_font_size=16,
        breakpoints={"palm": 719, "lap": 720, "desk": 1024},
        z_layers={"header": 3, "modal-elements": {"close-button": 1}},
    )
