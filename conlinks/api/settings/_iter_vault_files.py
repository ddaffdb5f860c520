"""Walk a vault directory."""

from pathlib import Path


def _iter_vault_files(root: Path) -> list[str]:
    """Return vault-relative POSIX paths of files under ``root``, sorted.

    Hidden files and anything inside hidden directories (e.g. ``.obsidian``) are skipped.
    """
    vault_paths = []
    for file_path in root.rglob("*"):
        relative = file_path.relative_to(root)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if file_path.is_file():
            vault_paths.append(relative.as_posix())
    return sorted(vault_paths)
