"""Dependency checking utilities."""

import shutil

from mediafuse.config import ToolsConfig


def check_system_dependencies(tools: ToolsConfig | None = None) -> dict[str, bool]:
    """Check availability of system dependencies (binaries).

    Returns:
        Dict mapping tool names to availability status.
    """
    tools = tools or ToolsConfig()
    binaries = {"exiftool": tools.exiftool, "mediainfo": tools.mediainfo}
    return {name: shutil.which(executable) is not None for name, executable in binaries.items()}


def check_python_dependencies() -> dict[str, bool]:
    """Check availability of Python packages backed by native libraries.

    Returns:
        Dict mapping package names to availability status.
    """
    packages = {}

    # python-magic needs libmagic at import time
    try:
        import magic  # noqa: F401

        packages["python-magic"] = True
    except ImportError:
        packages["python-magic"] = False

    # PyYAML is only needed for config files
    try:
        import yaml  # noqa: F401

        packages["pyyaml"] = True
    except ImportError:
        packages["pyyaml"] = False

    return packages


def check_all_dependencies(tools: ToolsConfig | None = None) -> dict[str, dict[str, bool]]:
    """Check all dependencies.

    Returns:
        Dict with 'system' and 'python' keys containing availability dicts.
    """
    return {
        "system": check_system_dependencies(tools),
        "python": check_python_dependencies(),
    }


def print_dependency_status(tools: ToolsConfig | None = None) -> None:
    """Print dependency status to stdout."""
    deps = check_all_dependencies(tools)

    print("mediafuse dependency status:")
    print("=" * 40)

    print("\nSystem binaries:")
    for name, available in sorted(deps["system"].items()):
        icon = "✓" if available else "✗"
        print(f"  {icon} {name}")

    print("\nPython packages:")
    for name, available in sorted(deps["python"].items()):
        icon = "✓" if available else "✗"
        print(f"  {icon} {name}")

    if not deps["system"]["exiftool"]:
        print("\n⚠️  exiftool is required. Install: brew install exiftool")
    if not deps["system"]["mediainfo"]:
        print("\n⚠️  mediainfo is required. Install: brew install media-info")
    if not deps["python"]["python-magic"]:
        print("\n💡 For MIME sniffing: install libmagic (brew install libmagic)")
