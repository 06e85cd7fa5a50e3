"""
Naming rules for generated artifacts.

Responsibilities:
- Derive the base name from the CSV file name
- Build the container class name (<baseName>SO)
- Build artifact paths (generated source, persisted asset, export target)
- Sanitize column comments for single-line doc comments
"""

import os

CLASS_SUFFIX = "SO"
SOURCE_EXTENSION = ".cs"
ASSET_EXTENSION = ".asset"
EXPORT_EXTENSION = ".csv"


def build_base_name(csv_path: str) -> str:
    """
    File name without extension, spaces replaced by underscores.
    """
    stem = os.path.splitext(os.path.basename(csv_path))[0]
    return stem.replace(" ", "_")


def build_class_name(base_name: str) -> str:
    return f"{base_name}{CLASS_SUFFIX}"


def build_source_path(output_folder: str, class_name: str) -> str:
    return os.path.join(output_folder, class_name + SOURCE_EXTENSION)


def build_asset_path(output_folder: str, class_name: str) -> str:
    return os.path.join(output_folder, class_name + ASSET_EXTENSION)


def build_default_export_path(base_name: str) -> str:
    return base_name + EXPORT_EXTENSION


def escape_comment(text: str) -> str:
    """
    Escape backslashes and double quotes, drop CR/LF.
    """
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "")
        .replace("\r", "")
    )
