# tests/conftest.py
import pytest
from scaffold_core.catalog import TemplateCatalog


@pytest.fixture(scope="session")
def catalog():
    """The bundled template catalog, loaded once."""
    return TemplateCatalog.builtin()


@pytest.fixture
def write_manifest(tmp_path):
    """Write template files plus a manifest listing them; returns the manifest path."""

    def _write(entries, bodies=None):
        import yaml

        for name, body in (bodies or {}).items():
            target = tmp_path / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(body.encode("utf-8") if isinstance(body, str) else body)

        manifest = tmp_path / "catalog.yml"
        manifest.write_text(yaml.safe_dump({"templates": entries}))
        return manifest

    return _write
