import pytest
from fastapi.testclient import TestClient

from main import create_app
from utils.config import Settings


@pytest.fixture
def audio_root(tmp_path):
    """
    music/
        rock/a.mp3
        b.wav
        skip.txt
    """
    root = tmp_path / "music"
    (root / "rock").mkdir(parents=True)
    (root / "rock" / "a.mp3").write_bytes(b"0123456789")
    (root / "b.wav").write_bytes(b"RIFF----WAVE")
    (root / "skip.txt").write_text("not audio")
    return root


@pytest.fixture
def client(audio_root):
    app = create_app(Settings(audio_dir=audio_root))
    return TestClient(app)
