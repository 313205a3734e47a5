from __future__ import annotations

import json
import logging

from updatecheck.domain.errors import ManifestError, UnsupportedSchemaError
from updatecheck.domain.models import UpdateInfo
from updatecheck.manifest import messages
from updatecheck.manifest.schema_1_3 import parse_schema_1_3
from updatecheck.manifest.schema_1_5 import parse_schema_1_5
from updatecheck.manifest.schema_1_6 import parse_schema_1_6
from updatecheck.manifest.upgrade import upgrade_1_5_to_1_6

log = logging.getLogger(__name__)


def parse_manifest(raw: bytes | str) -> UpdateInfo:
    """Decode a version file of any supported schema into the canonical model.

    ``is_update_available`` is left False; deciding it is the caller's job.
    Raises ManifestError (or UnsupportedSchemaError) with every problem found.
    """
    try:
        doc = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestError([messages.FAILED_TO_PARSE_VERSION_FILE, str(e)]) from e

    if not isinstance(doc, dict) or not doc or "SchemaVersion" not in doc:
        raise ManifestError(messages.missing("SchemaVersion"))

    schema = doc["SchemaVersion"]
    if not isinstance(schema, str):
        raise ManifestError(messages.invalid_value("SchemaVersion"))
    log.info("manifest_schema version=%s", schema)

    if schema == messages.SCHEMA_VERSION_1_3:
        return upgrade_1_5_to_1_6(parse_schema_1_3(doc))
    if schema == messages.SCHEMA_VERSION_1_5:
        return upgrade_1_5_to_1_6(parse_schema_1_5(doc))
    if schema == messages.SCHEMA_VERSION_1_6:
        return parse_schema_1_6(doc)

    raise UnsupportedSchemaError(messages.UNSUPPORTED_SCHEMA_VERSION)
