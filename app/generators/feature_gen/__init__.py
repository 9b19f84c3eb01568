"""Feature module code generator."""
from app.generators.feature_gen.generator import generate_all_code_files, generate_feature_files
from app.generators.feature_gen.packager import (
    PackagingError,
    build_archive,
    download_feature_files,
    zip_feature_files,
)

__all__ = [
    "generate_all_code_files",
    "generate_feature_files",
    "PackagingError",
    "build_archive",
    "download_feature_files",
    "zip_feature_files",
]
