"""
Basic SEMS usage example.

This example demonstrates the fundamental SEMS operations:
- Describing employees and documents
- Evaluating access
- Opening a document with audit recording
- Reading a subject's audit trail
"""

import asyncio
from datetime import datetime

from sems import AccessService, Classification, Department, HourWindow, Resource, Subject, UserRole


async def basic_example():
    """Demonstrate basic SEMS usage"""
    print("Basic SEMS Example")
    print("=" * 30)

    # 1. Describe a subject and a document
    officer = Subject(
        id="EMP-1023",
        name="Payroll Officer",
        role=UserRole.PAYROLL_OFFICER,
        department=Department.FINANCE,
        clearance=Classification.CONFIDENTIAL,
    )
    report = Resource(
        id="DOC-7781",
        title="Monthly Payroll Report",
        classification=Classification.CONFIDENTIAL,
        owner_id="EMP-2045",
        department=Department.FINANCE,
        allowed_roles=[UserRole.PAYROLL_OFFICER, UserRole.HR_MANAGER],
        allowed_time_range=HourWindow(8, 17),
    )

    # 2. Create the service with an in-memory audit trail
    service = AccessService()
    print("✓ Created access service")

    try:
        # 3. Evaluate without recording
        verdict = service.check(officer, report, now=datetime(2025, 12, 24, 10, 0))
        print(f"✓ Morning check: allowed={verdict.allowed} via {verdict.model.value}")

        # 4. Open the document after hours
        verdict, rec = await service.open_document(officer, report, now=datetime(2025, 12, 24, 18, 0))
        print(f"✓ Evening attempt denied: {verdict.reason}")
        print(f"✓ Audit record {rec.id}: {rec.action} {rec.result.value}")

        # 5. Check the audit trail
        records = await service.activity(officer.id)
        print(f"✓ Audit records for {officer.id}: {len(records)}")

    finally:
        # 6. Cleanup
        await service.close()
        print("✓ Service closed")


if __name__ == "__main__":
    asyncio.run(basic_example())
