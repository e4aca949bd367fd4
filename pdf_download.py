from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import quote, urljoin

import requests

from ord_extract import load_manifest

log = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def _file_url(base_url: str, file_path: str) -> str:
    return urljoin(base_url, quote(file_path, safe="/"))


def download_file(session: requests.Session, url: str, output_path: Path) -> Path | None:
    """
    Download one file unless it already exists.
    Returns the local path, or None if the download failed.
    """
    output_path = Path(output_path)
    if output_path.exists():
        log.info("Skipping %s, already exists", url)
        return output_path

    log.info("Downloading %s", url)
    try:
        with session.get(url, stream=True, timeout=60) as response:
            response.raise_for_status()
            output_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = output_path.with_suffix(output_path.suffix + ".part")
            with tmp_path.open("wb") as handle:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        handle.write(chunk)
            tmp_path.replace(output_path)
    except (requests.RequestException, OSError) as exc:
        log.error("Failed to download %s: %s", url, exc)
        return None
    return output_path


def download_manifest(manifest_path: Path, pdf_dir: Path, base_url: str) -> list[Path]:
    """Fetch every PDF listed in the manifest into ``pdf_dir``."""
    pdf_dir = Path(pdf_dir)
    pdf_dir.mkdir(parents=True, exist_ok=True)

    saved = []
    session = requests.Session()
    for entry in load_manifest(manifest_path):
        file_path = str(entry["file"])
        target = pdf_dir / Path(file_path).name
        result = download_file(session, _file_url(base_url, file_path), target)
        if result is not None:
            saved.append(result)
    log.info("Downloaded %d of the manifest files", len(saved))
    return saved
