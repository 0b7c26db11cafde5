from collections.abc import Iterable, Iterator
from pathlib import Path

_LANGUAGE_ALIASES = {
    "swift": "swift",
    "swiftinterface": "swift",
}

_EXTENSION_LANGUAGE_MAP = {
    ".swift": "swift",
    ".swiftinterface": "swift",
}

_SUPPORTED_LANGUAGES = set(_LANGUAGE_ALIASES.values())


def normalize_language(language: str) -> str:
    normalized = language.strip().lower()
    resolved = _LANGUAGE_ALIASES.get(normalized, normalized)
    if resolved not in _SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language '{language}'. Supported: {sorted(_SUPPORTED_LANGUAGES)}")
    return resolved


def detect_language_from_path(file_path: Path) -> str:
    suffix = file_path.suffix.lower()
    if suffix in _EXTENSION_LANGUAGE_MAP:
        return _EXTENSION_LANGUAGE_MAP[suffix]
    raise ValueError(f"Unsupported file extension: {suffix}")


def is_supported_file(path: Path) -> bool:
    return path.suffix.lower() in _EXTENSION_LANGUAGE_MAP


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def collect_source_files(paths: Iterable[str | Path]) -> Iterator[Path]:
    """Yield lintable files, walking directories recursively and skipping hidden ones.

    Explicitly named files are yielded as long as their extension is supported; duplicates are
    dropped while keeping first-seen order.
    """
    seen: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            found = sorted(
                p for p in path.rglob("*") if p.is_file() and is_supported_file(p) and not _is_hidden(p, path)
            )
        elif path.exists():
            detect_language_from_path(path)
            found = [path]
        else:
            raise FileNotFoundError(f"File not found: {raw}")

        for file_path in found:
            resolved = file_path.resolve()
            if resolved not in seen:
                seen.add(resolved)
                yield file_path
