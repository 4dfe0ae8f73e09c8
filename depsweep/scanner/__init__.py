"""Source scanning — file collection and usage detection."""

from depsweep.scanner.files import SOURCE_EXTENSIONS, collect_files
from depsweep.scanner.usage import dependency_used, script_used

__all__ = ["SOURCE_EXTENSIONS", "collect_files", "dependency_used", "script_used"]
