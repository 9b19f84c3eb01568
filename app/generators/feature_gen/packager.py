"""Zip packaging of generated feature files."""
import io
import logging
import os
import tempfile
import zipfile
from pathlib import Path, PurePosixPath
from typing import Dict, Sequence, Union
from app.generators.feature_gen.context import NamingContext
from app.generators.feature_gen.generator import generate_all_code_files
from app.generators.feature_gen.types import EntityField, EntityRelation, FeatureConfig

log = logging.getLogger(__name__)

# Earliest timestamp a zip entry can carry
ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)
FILE_MODE = 0o644
DIR_MODE = 0o755


class PackagingError(Exception):
    """Raised when an archive cannot be built or saved."""


def _check_root_folder(root_folder: str) -> None:
    if not root_folder or "/" in root_folder or "\\" in root_folder or root_folder in (".", ".."):
        raise PackagingError(f"Invalid archive root folder: {root_folder!r}")


def _check_path(path: str) -> PurePosixPath:
    rel = PurePosixPath(path)
    if not path or "\\" in path or rel.is_absolute() or ".." in rel.parts:
        raise PackagingError(f"Unsafe file path in archive: {path!r}")
    return rel


def _entry(name: str, is_dir: bool = False) -> zipfile.ZipInfo:
    info = zipfile.ZipInfo(name, date_time=ZIP_EPOCH)
    if is_dir:
        info.external_attr = (0o40000 | DIR_MODE) << 16 | 0x10
    else:
        info.external_attr = (0o100000 | FILE_MODE) << 16
        info.compress_type = zipfile.ZIP_DEFLATED
    return info


def build_archive(files: Dict[str, str], root_folder: str) -> bytes:
    """
    Serialize a path -> content mapping into zip bytes.

    Every file is placed under ``root_folder/``. Each nested folder gets an
    explicit directory entry and all entries carry a fixed timestamp, so the
    same input always yields byte-identical output.

    Raises:
        PackagingError: for an invalid root folder or an unsafe path key
    """
    _check_root_folder(root_folder)
    paths = {path: _check_path(path) for path in files}

    directories = []
    for rel in paths.values():
        for parent in reversed(rel.parents):
            if parent.parts and parent not in directories:
                directories.append(parent)

    buffer = io.BytesIO()
    try:
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
            zf.writestr(_entry(f"{root_folder}/", is_dir=True), b"")
            for directory in directories:
                zf.writestr(_entry(f"{root_folder}/{directory}/", is_dir=True), b"")
            for path, rel in paths.items():
                zf.writestr(_entry(f"{root_folder}/{rel}"), files[path].encode("utf-8"))
    except (zipfile.BadZipFile, ValueError, OSError) as e:
        raise PackagingError(f"Failed to build archive: {e}") from e
    return buffer.getvalue()


def zip_feature_files(
    config: FeatureConfig,
    fields: Sequence[EntityField],
    relations: Sequence[EntityRelation],
) -> bytes:
    """Generate all feature files and return them zipped under ``{lower}/``."""
    ctx = NamingContext.from_config(config)
    files = generate_all_code_files(config, fields, relations)
    return build_archive(files, ctx.lower)


def save_archive(data: bytes, target: Path) -> Path:
    """
    Write archive bytes to ``target`` atomically.

    The bytes go to a temporary file in the target directory which is then
    renamed over the target; on failure the temporary file is removed.
    """
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
    except OSError as e:
        raise PackagingError(f"Cannot write to {target.parent}: {e}") from e

    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_name, target)
    except OSError as e:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise PackagingError(f"Failed to save archive {target}: {e}") from e
    return target


def download_feature_files(
    config: FeatureConfig,
    fields: Sequence[EntityField],
    relations: Sequence[EntityRelation],
    out_dir: Union[str, Path],
) -> Path:
    """
    Package the feature and save it as ``{lower}-feature.zip`` in ``out_dir``.

    Returns:
        Path of the written archive

    Raises:
        PackagingError: when building or saving fails; no partial file is left
    """
    ctx = NamingContext.from_config(config)
    data = zip_feature_files(config, fields, relations)
    target = save_archive(data, Path(out_dir) / ctx.archive_name)
    log.info("Saved feature archive %s (%d bytes)", target, len(data))
    return target
