"""运行时特性检测：检查可选依赖以确定可用的能力。

Runtime feature detection for optional extras.

Checks availability of optional dependencies to determine which
TLS backends and credential sources can be used.
"""
from __future__ import annotations


def _check_import(module_name: str) -> bool:
    """Check if a module is importable."""
    try:
        __import__(module_name)
        return True
    except ImportError:
        return False


# Capability feature flags
HAS_TRUSTSTORE: bool = _check_import("truststore")
HAS_CERTIFI: bool = _check_import("certifi")
HAS_HTTP2: bool = _check_import("h2")
HAS_KEYRING: bool = _check_import("keyring")


# Map pip package names to import module names (when they differ)
_PACKAGE_TO_MODULE: dict[str, str] = {}


def require_extra(extra_name: str, package_name: str) -> None:
    """Raise ImportError with installation hint if extra is not available.

    Args:
        extra_name: Name of the pip extra (e.g., 'keyring')
        package_name: Name of the required package (e.g., 'keyring')

    Raises:
        ImportError: With installation instructions when package is not available.
    """
    module_name = _PACKAGE_TO_MODULE.get(package_name, package_name)
    if _check_import(module_name):
        return
    raise ImportError(
        f"The '{extra_name}' extra is required for this feature. "
        f"Install it with: pip install async-openai[{extra_name}]"
    )
