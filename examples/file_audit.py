"""
SEMS example with a YAML directory and a file-backed audit trail.

This example demonstrates:
- Loading subjects and documents from a YAML file
- Configuring the JSON-lines audit logger
- Handling catalog errors
"""

import asyncio
import tempfile
from pathlib import Path

import yaml

from sems import AccessService, Catalog, Config
from sems.demo.sample_data import SAMPLE_CATALOG
from sems.errors import CatalogError


async def file_audit_example():
    """Demonstrate file-backed SEMS usage"""
    print("File Audit SEMS Example")
    print("=" * 30)

    workdir = Path(tempfile.mkdtemp(prefix="sems-"))
    directory = workdir / "directory.yaml"
    directory.write_text(yaml.safe_dump(SAMPLE_CATALOG), encoding="utf-8")

    # 1. Load the directory
    catalog = Catalog.from_file(str(directory))
    print(f"✓ Loaded {len(catalog.subjects)} subjects and {len(catalog.resources)} documents")

    # 2. Configure a file audit logger
    config = Config(audit_logger_type="file", audit_file_path=str(workdir / "audit.jsonl"))
    service = AccessService(config)
    print(f"✓ Audit trail at {config.audit_file_path}")

    try:
        # 3. List what a manager can see, then open each document
        manager = catalog.get_subject("EMP-3091")
        for resource in service.accessible(manager, catalog.resources):
            _, rec = await service.open_document(manager, resource)
            print(f"✓ {rec.action} ({rec.origin})")

        # 4. Unknown ids raise CatalogError
        try:
            catalog.get_resource("DOC-0000")
        except CatalogError as e:
            print(f"✓ Lookup failed as expected: {e}")

    finally:
        await service.close()
        print("✓ Service closed")


if __name__ == "__main__":
    asyncio.run(file_audit_example())
