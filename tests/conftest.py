import sys
import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest


def _add_src_to_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()


JarWriter = Callable[..., Path]


@pytest.fixture
def write_jar() -> JarWriter:
    """Return a helper that builds a JAR at a path with an optional manifest."""

    def _write(path: Path, manifest: str | None = None, payload: bytes = b"") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(path, "w") as archive:
            if manifest is not None:
                archive.writestr("META-INF/MANIFEST.MF", manifest)
            archive.writestr("pkg/Example.class", payload or b"\xca\xfe\xba\xbe")
        return path

    return _write
