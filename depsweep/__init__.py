"""depsweep — find and remove unused npm dependencies."""

from depsweep.manifest import Manifest, load_manifest
from depsweep.orchestrator import find_unused
from depsweep.scanner.files import collect_files
from depsweep.scanner.usage import dependency_used, script_used

__all__ = [
    "Manifest",
    "collect_files",
    "dependency_used",
    "find_unused",
    "load_manifest",
    "script_used",
]
