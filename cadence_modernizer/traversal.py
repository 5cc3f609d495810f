"""
Discovery of Cadence sources (.cdc) in a Flow project tree.

Contracts, transactions and scripts are collected recursively. Dependency
installs (`imports/` is where the flow dependency manager puts them), build
output and tool metadata are pruned by directory name.

Typical usage:
    from pathlib import Path
    from cadence_modernizer.traversal import find_cadence_files

    files = find_cadence_files(Path("./cadence"))
    contracts_only = find_cadence_files(Path("."), filter_fn=lambda p: "contracts" in p.parts)
"""

import logging
from pathlib import Path
from typing import Callable, FrozenSet, Iterator, Optional, Set

logger = logging.getLogger(__name__)

CADENCE_SUFFIX = ".cdc"

DEFAULT_IGNORE_DIRS: FrozenSet[str] = frozenset(
    {
        "imports",
        "node_modules",
        "build",
        "dist",
        "out",
        ".git",
        ".hg",
        ".svn",
        ".idea",
        ".vscode",
        ".venv",
        "venv",
        "__pycache__",
        ".pytest_cache",
        ".cache",
    }
)


def is_cadence_file(path: Path) -> bool:
    """
    True for .cdc files, whatever the case of the suffix.

    Examples:
        >>> is_cadence_file(Path("FungibleToken.cdc"))
        True
        >>> is_cadence_file(Path("flow.json"))
        False
    """
    return path.suffix.lower() == CADENCE_SUFFIX


def should_ignore_directory(dir_path: Path, ignore_dirs: Set[str]) -> bool:
    # Only the final component counts, so "imports" is pruned at any depth.
    return dir_path.name in ignore_dirs


def _iter_cadence_files(
    directory: Path,
    ignore_dirs: Set[str],
    follow_symlinks: bool,
) -> Iterator[Path]:
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        # PermissionError included: an unreadable subtree is skipped, not fatal.
        logger.warning("Cannot list %s: %s", directory, e)
        return

    for entry in entries:
        if entry.is_symlink() and not follow_symlinks:
            logger.debug("Not following symlink %s", entry)
            continue
        if entry.is_dir():
            if should_ignore_directory(entry, ignore_dirs):
                logger.debug("Pruned %s", entry)
                continue
            yield from _iter_cadence_files(entry, ignore_dirs, follow_symlinks)
        elif entry.is_file() and is_cadence_file(entry):
            yield entry


def find_cadence_files(
    root: Path,
    ignore_dirs: Optional[Set[str]] = None,
    follow_symlinks: bool = False,
    filter_fn: Optional[Callable[[Path], bool]] = None,
) -> list[Path]:
    """
    Collect every .cdc file under root, sorted.

    Args:
        root: Directory to search.
        ignore_dirs: Directory names to prune; DEFAULT_IGNORE_DIRS when None.
        follow_symlinks: Descend into / include symlinked entries.
        filter_fn: Extra predicate a file must satisfy to be kept.

    Raises:
        FileNotFoundError: root does not exist.
        NotADirectoryError: root is a file.
    """
    if ignore_dirs is None:
        ignore_dirs = DEFAULT_IGNORE_DIRS

    root = root.resolve()
    if not root.exists():
        logger.error("Root directory does not exist: %s", root)
        raise FileNotFoundError(f"Root directory does not exist: {root}")
    if not root.is_dir():
        logger.error("Root path is not a directory: %s", root)
        raise NotADirectoryError(f"Root path is not a directory: {root}")

    logger.info("Starting traversal from: %s", root)
    files = sorted(
        path
        for path in _iter_cadence_files(root, ignore_dirs, follow_symlinks)
        if filter_fn is None or filter_fn(path)
    )
    logger.info("Traversal complete: found %d Cadence file(s) in %s", len(files), root)
    return files
