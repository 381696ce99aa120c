# src/hdrpack/core/bundler.py
import os
import stat
import sys
import tempfile
from pathlib import Path

from hdrpack.config import BundleConfig
from hdrpack.core.classify import classify
from hdrpack.core.content import load_record
from hdrpack.core.discover import discover
from hdrpack.core.ignore import find_ignore_file, load_ignore_spec
from hdrpack.errors import WriteError
from hdrpack.models import Bundle, Kind


def collect(config: BundleConfig) -> Bundle:
    """
    Discovers, classifies and filters every file without touching the destination.
    Raises DiscoveryError or ReadError on the first hard failure.
    """
    config.validate()

    ignore_file = find_ignore_file(config.root, config.ignore_file)
    ignore_spec = load_ignore_spec(ignore_file)

    paths = discover(config.folder_paths(), base=config.root, ignore_spec=ignore_spec)
    # A previous run may have written the destination into a scanned folder
    out_resolved = config.out.resolve()
    paths = [p for p in paths if p.resolve() != out_resolved]

    bundle = Bundle()
    for path in paths:
        kind = classify(path, config.extensions)
        record = load_record(path, kind)
        if record is None:
            print(f"  > [Warning] Unsupported file ({path})", file=sys.stderr)
            bundle.skipped.append(path)
            continue
        bundle.add(record)
    return bundle


def write_output(text: str, destination: Path) -> None:
    """
    Writes next to the destination, then swaps the file in.
    A failed write leaves any existing destination untouched.
    A symlinked destination is followed, so the link keeps pointing at the new file.
    """
    target = destination.resolve()
    parent = target.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
        mode = stat.S_IMODE(target.stat().st_mode) if target.exists() else 0o644
    except OSError as e:
        raise WriteError(destination, e.strerror or str(e)) from e

    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", newline="", dir=parent,
            prefix=f".{target.name}.", suffix=".tmp", delete=False,
        ) as f:
            tmp_name = f.name
            f.write(text)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise WriteError(destination, e.strerror or str(e)) from e


def bundle(config: BundleConfig) -> Bundle:
    """Runs the whole pipeline and writes the single header."""
    result = collect(config)
    write_output(result.render(config.impl_macro), config.out)
    return result


def summarize(result: Bundle) -> str:
    return (
        f"Headers: {result.count(Kind.HEADER)} | "
        f"Sources: {result.count(Kind.SOURCE)} | "
        f"Skipped: {len(result.skipped)}"
    )
