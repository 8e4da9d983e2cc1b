"""Version information for SleepTracker."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Get version from installed package metadata.

    Returns:
        Version string (e.g., "0.1.0") or "unknown" if not found
    """
    try:
        return version("sleeptracker")
    except PackageNotFoundError:
        # Development checkout without an install: read pyproject.toml
        try:
            import tomllib
            from pathlib import Path

            pyproject_path = Path(__file__).parent.parent.parent.parent / "pyproject.toml"
            if not pyproject_path.exists():
                return "unknown"

            with open(pyproject_path, "rb") as f:
                data = tomllib.load(f)
            return data.get("project", {}).get("version", "unknown")

        except (ImportError, OSError, ValueError):
            return "unknown"


__version__ = get_version()
