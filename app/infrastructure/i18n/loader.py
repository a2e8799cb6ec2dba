"""Dictionary loading interface and implementations.

Defines the contract for reading translation dictionaries from a directory
and provides the file-system loader used by the dictionary store.
"""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

import yaml

from infrastructure.i18n.exceptions import DictionaryDecodeError, MalformedFileNameError
from infrastructure.i18n.models import (
    DictionaryFileName,
    DictionaryTree,
    is_full_locale_tag,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

Decoder = Callable[[str], Any]

DEFAULT_DECODERS: Dict[str, Decoder] = {
    "js": json.loads,
    "json": json.loads,
    "yml": yaml.safe_load,
    "yaml": yaml.safe_load,
}


def merge_dictionary(
    trees: Dict[str, DictionaryTree],
    file_name: DictionaryFileName,
    data: Mapping[str, Any],
) -> None:
    """Merge decoded file contents into the tree for the file's locale.

    The default section merges at the tree root, any other section merges
    into a nested mapping created on first use. Keys already present are
    overwritten.

    Args:
        trees: Locale tag to dictionary tree, updated in place.
        file_name: Parsed file name selecting locale and section.
        data: Decoded key to value mapping.
    """
    tree = trees.setdefault(file_name.name, {})
    if file_name.is_default_section:
        tree.update(data)
        return

    section = tree.get(file_name.section)
    if not isinstance(section, dict):
        section = tree[file_name.section] = {}
    section.update(data)


class DictionaryLoader(ABC):
    """Abstract base for dictionary loaders.

    Implementations define how a search path is read and merged into the
    locale-keyed dictionary trees.
    """

    @abstractmethod
    def load_directory(
        self, path: Union[str, Path], trees: Dict[str, DictionaryTree]
    ) -> int:
        """Load every dictionary file in a directory into trees.

        Args:
            path: Directory to read.
            trees: Locale tag to dictionary tree, updated in place.

        Returns:
            Number of files merged.

        Raises:
            MalformedFileNameError: If a file name is not [section.]name.extension.
            DictionaryDecodeError: If a file cannot be decoded.
        """
        pass


class FileSystemDictionaryLoader(DictionaryLoader):
    """Loader for dictionary files stored in local directories.

    Files are named ``[section.]name.extension``; the extension selects a
    decoder (JSON for ``.js``/``.json``, YAML for ``.yml``/``.yaml``) and
    files with any other extension are ignored. Missing directories are
    skipped.

    Attributes:
        decoders: Extension to decoder mapping.
        base_dir: Directory relative search paths are resolved against
            (the working directory at load time when not set).
    """

    def __init__(
        self,
        decoders: Optional[Mapping[str, Decoder]] = None,
        base_dir: Optional[Union[str, Path]] = None,
    ):
        self.decoders: Dict[str, Decoder] = dict(
            DEFAULT_DECODERS if decoders is None else decoders
        )
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve a search path to an absolute directory."""
        path = Path(path)
        if path.is_absolute():
            return path
        return (self.base_dir or Path(os.getcwd())) / path

    def load_directory(
        self, path: Union[str, Path], trees: Dict[str, DictionaryTree]
    ) -> int:
        directory = self.resolve_path(path)
        if not directory.is_dir():
            logger.debug("dictionary_directory_missing", directory=str(directory))
            return 0

        file_count = 0
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if not entry.is_file():
                continue

            try:
                file_name = DictionaryFileName.parse(entry.name)
            except MalformedFileNameError as e:
                logger.error(
                    "malformed_dictionary_file_name",
                    file=entry.name,
                    directory=str(directory),
                )
                raise MalformedFileNameError(entry.name, str(directory)) from e

            decoder = self.decoders.get(file_name.extension)
            if decoder is None:
                continue

            if not is_full_locale_tag(file_name.name):
                logger.warning(
                    "skipped_dictionary_file",
                    file=entry.name,
                    reason="name is not a full locale tag",
                )
                continue

            data = self._read(entry, decoder)
            if not data:
                continue
            if not isinstance(data, dict):
                logger.warning(
                    "invalid_dictionary_format", file=str(entry), expected="dict"
                )
                continue

            merge_dictionary(trees, file_name, data)
            file_count += 1

        logger.info(
            "dictionary_directory_loaded",
            directory=str(directory),
            file_count=file_count,
        )
        return file_count

    def _read(self, path: Path, decoder: Decoder) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return decoder(f.read())
        except (ValueError, yaml.YAMLError) as e:
            logger.error("dictionary_decode_error", file=str(path), error=str(e))
            raise DictionaryDecodeError(str(path), str(e)) from e
