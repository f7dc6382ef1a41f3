# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
HR_PRIVILEGE = "hr"
SALES_PRIVILEGE = "sales"
SHIFTPLANNER_PRIVILEGE = "shiftplanner"
ADMIN_PRIVILEGE = "admin"

CORE_PERMISSIONS = [
    {
        "code": HR_PRIVILEGE,
        "module": "core",
        "description": "Read working hour reports of all employees and manage billing",
    },
    {
        "code": SALES_PRIVILEGE,
        "module": "core",
        "description": "Read own working hour reports",
    },
    {
        "code": SHIFTPLANNER_PRIVILEGE,
        "module": "core",
        "description": "Plan shifts and book sales persons",
    },
    {
        "code": ADMIN_PRIVILEGE,
        "module": "core",
        "description": "Full system administration",
    },
]
