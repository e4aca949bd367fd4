"""JSON files for the question bank and the ingestion output."""
import json
from pathlib import Path


def json_dump(payload: object) -> str:
    """Pretty JSON that keeps Swedish characters readable."""
    return json.dumps(payload, ensure_ascii=False, indent=2)


def read_json_file(path: Path, default: object) -> object:
    """Parsed content of ``path``, or ``default`` when the file is missing.

    Invalid JSON raises json.JSONDecodeError.
    """
    if not path.exists():
        return default
    return json.loads(path.read_text(encoding="utf-8"))


def write_json_file(path: Path, payload: object) -> None:
    """Replace ``path`` in one step so readers never see a partial file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    tmp_path.write_text(json_dump(payload), encoding="utf-8")
    tmp_path.replace(path)
