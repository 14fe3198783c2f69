"""Top-level package for the Migration Verifier.

Provides subpackages:
- migration_verifier.walking – recursive file enumeration
- migration_verifier.resolution – import extraction and module resolution
- migration_verifier.manifest – dependency manifest loading and diffing
- migration_verifier.symbols – CSS custom property extraction
- migration_verifier.properties – seeded sampling driver and built-in suite
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.1"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("migration_verifier")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
