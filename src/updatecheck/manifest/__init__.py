from .parser import parse_manifest
from .serializer import dumps_manifest, to_manifest
from .tokens import package_type_to_string, release_type_to_string, target_platform_to_string
from .upgrade import upgrade_1_5_to_1_6

__all__ = [
    "parse_manifest",
    "dumps_manifest",
    "to_manifest",
    "package_type_to_string",
    "release_type_to_string",
    "target_platform_to_string",
    "upgrade_1_5_to_1_6",
]
