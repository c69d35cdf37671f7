"""
SEMS Demo Application

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

This demo walks the sample directory through the access engine:
- Per-subject document listings at a fixed time of day
- Opening documents with audit recording
- A time-window denial outside working hours
- A contract-expiry denial
- Audit trail retrieval
"""

import asyncio
import logging
import sys
from datetime import datetime

from sems.catalog import Catalog
from sems.core.config import Config
from sems.core.service import AccessService
from sems.demo.sample_data import SAMPLE_CATALOG
from sems.errors import SEMSError
from sems.util.config import get_config_value


MIDDAY = datetime(2025, 12, 24, 12, 0)
EVENING = datetime(2025, 12, 24, 19, 0)
NEW_YEAR = datetime(2026, 1, 2, 10, 0)


def _line(verdict) -> str:
    mark = "✓" if verdict.allowed else "✗"
    reason = f" - {verdict.reason}" if verdict.reason else ""
    return f"{mark} [{verdict.model.value}]{reason}"


async def main():
    """Main demo function"""
    print("SEMS Access Engine Demo")
    print("=" * 50)
    print()

    config = Config.from_env()
    # No request context here, so fill in placeholder origins unless told not to
    config.simulate_origin = get_config_value("simulate_origin", True, bool)
    logging.basicConfig(level=config.log_level)

    try:
        catalog = Catalog.from_dict(SAMPLE_CATALOG)
        service = AccessService(config)
    except SEMSError as e:
        print(f"✗ Setup failed: {e}")
        return 1

    print("Step 1: Document access matrix at 12:00")
    print("-" * 40)
    for subject in catalog.subjects:
        print(f"{subject.name} ({subject.role.value}, {subject.clearance.value})")
        for resource in catalog.resources:
            print(f"  {resource.id}: {_line(service.check(subject, resource, MIDDAY))}")
        print()

    print("Step 2: Opening documents")
    print("-" * 40)
    attempts = [
        ("EMP-5001", "DOC-9004", MIDDAY),
        ("EMP-5001", "DOC-7781", MIDDAY),
        ("EMP-1023", "DOC-7781", EVENING),
        ("EMP-4001", "DOC-1102", NEW_YEAR),
        ("EMP-001", "DOC-5512", MIDDAY),
    ]
    for subject_id, resource_id, moment in attempts:
        subject = catalog.get_subject(subject_id)
        resource = catalog.get_resource(resource_id)
        verdict, rec = await service.open_document(subject, resource, now=moment)
        print(f"{subject.name} -> {resource.title} at {moment:%Y-%m-%d %H:%M}")
        print(f"  {_line(verdict)}")
        print(f"  audit {rec.id}: {rec.action} {rec.result.value} from {rec.origin}")
    print()

    print("Step 3: Audit trail")
    print("-" * 40)
    for subject in catalog.subjects:
        records = await service.activity(subject.id)
        if not records:
            continue
        print(f"{subject.name}: {len(records)} record(s)")
        for rec in records:
            reason = f" ({rec.reason})" if rec.reason else ""
            print(f"  {rec.timestamp} {rec.action} {rec.result.value}{reason}")
    print()

    await service.close()
    print("Demo completed successfully!")
    return 0


def run():
    """Console entry point"""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nDemo interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    run()
