# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Sample directory used by the demo and the tests.
"""

SAMPLE_CATALOG = {
    "subjects": [
        {
            "id": "EMP-001",
            "name": "Abrham Mulugeta",
            "role": "System Administrator",
            "department": "Information Technology",
            "clearance": "Confidential",
            "employment_status": "Permanent",
            "mfa_enabled": True,
        },
        {
            "id": "EMP-002",
            "name": "Sarah Connor",
            "role": "Security Administrator",
            "department": "Information Technology",
            "clearance": "Confidential",
            "employment_status": "Permanent",
            "mfa_enabled": True,
        },
        {
            "id": "EMP-1023",
            "name": "Abel Tesfaye",
            "role": "Payroll Officer",
            "department": "Finance",
            "clearance": "Confidential",
            "employment_status": "Permanent",
            "mfa_enabled": True,
        },
        {
            "id": "EMP-2045",
            "name": "Eleanor Shellstrop",
            "role": "HR Manager",
            "department": "Human Resources",
            "clearance": "Confidential",
            "employment_status": "Permanent",
            "mfa_enabled": True,
        },
        {
            "id": "EMP-3091",
            "name": "Alazer Gebre",
            "role": "Department Manager",
            "department": "Operations",
            "clearance": "Internal",
            "employment_status": "Permanent",
        },
        {
            "id": "EMP-4001",
            "name": "Ryan Howard",
            "role": "Contract Employee",
            "department": "Marketing",
            "clearance": "Public",
            "employment_status": "Contract",
            "contract_end_date": "2025-12-31",
        },
        {
            "id": "EMP-5001",
            "name": "Pam Beesly",
            "role": "Senior Employee",
            "department": "Research & Development",
            "clearance": "Internal",
            "employment_status": "Permanent",
            "mfa_enabled": True,
        },
    ],
    "resources": [
        {
            "id": "DOC-7781",
            "title": "2025 Salary Adjustment Report",
            "classification": "Confidential",
            "owner_id": "EMP-2045",
            "department": "Finance",
            "allowed_roles": ["HR Director", "HR Manager", "Payroll Officer", "System Administrator"],
            "allowed_time_range": {"start": 8, "end": 17},
            "last_modified": "2025-11-12",
            "content": "Sensitive salary data for all departments...",
        },
        {
            "id": "DOC-3320",
            "title": "IT Security Awareness Training",
            "classification": "Internal",
            "owner_id": "EMP-001",
            "department": "Information Technology",
            "allowed_roles": "*",
            "last_modified": "2025-10-01",
            "content": "Please ensure you use strong passwords and enable MFA...",
        },
        {
            "id": "DOC-1102",
            "title": "Company Holiday Calendar 2026",
            "classification": "Public",
            "owner_id": "EMP-2045",
            "department": "Human Resources",
            "allowed_roles": "*",
            "last_modified": "2025-12-01",
            "content": "Full list of company observed holidays for the next year...",
        },
        {
            "id": "DOC-9004",
            "title": "Project Phoenix Status Update",
            "classification": "Internal",
            "owner_id": "EMP-3091",
            "department": "Operations",
            "allowed_roles": ["Department Manager", "Project Supervisor", "System Administrator"],
            "shared_with_ids": ["EMP-5001"],
            "last_modified": "2025-12-20",
            "content": "Project status is Green. Milestone 3 reached.",
        },
        {
            "id": "DOC-5512",
            "title": "Employee Disciplinary Record - Confidential",
            "classification": "Confidential",
            "owner_id": "EMP-2045",
            "department": "Human Resources",
            "allowed_roles": ["HR Director", "HR Manager", "System Administrator"],
            "last_modified": "2025-12-15",
            "content": "Confidential disciplinary details for employee X...",
        },
    ],
}
