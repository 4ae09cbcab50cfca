"""Read and write whole binary assets through fsspec.

``storage_options`` are passed on to fsspec, except for the ``compression``
key: ``"gzip"`` wraps the opened file with the gzip module, ``None`` leaves
it as is.
"""

import gzip
from typing import Optional

COMPRESSIONS = ("gzip",)


def compression_options(compression: Optional[str]) -> Optional[dict]:
    """Build ``storage_options`` for a ``--*-compression`` command line flag."""
    return {"compression": compression} if compression else None


def _open(url: str, mode: str, storage_options: Optional[dict]):
    from fsspec.core import url_to_fs

    opts = dict(storage_options or {})
    compression = opts.pop("compression", None)
    if compression is not None and compression not in COMPRESSIONS:
        raise ValueError(f"Unsupported compression: {compression}")

    fs, path = url_to_fs(url, **opts)
    return fs.open(path, mode), compression


def read_bytes(url: str, storage_options: Optional[dict] = None) -> bytes:
    """Return the full contents of *url*.

    Args:
        url: Path or URL to load from.
        storage_options: fsspec options. Set compression='gzip' if compressed.
    """
    raw_stream, compression = _open(url, "rb", storage_options)
    with raw_stream:
        if compression == "gzip":
            return gzip.decompress(raw_stream.read())
        return raw_stream.read()


def write_bytes(url: str, data: bytes, storage_options: Optional[dict] = None) -> None:
    """Write *data* to *url*, replacing any existing file.

    Args:
        url: Path or URL where to save.
        data: Bytes to write.
        storage_options: fsspec options. Set compression='gzip' for gzip.
    """
    raw_stream, compression = _open(url, "wb", storage_options)
    with raw_stream:
        if compression == "gzip":
            data = gzip.compress(data, compresslevel=9)
        raw_stream.write(data)
