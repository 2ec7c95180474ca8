from __future__ import annotations

import pytest

V9_REPORT = (
    "\n"
    "                      First Baptist Church\n"
    "                    Fund Balance Report\n"
    "\n"
    "01/02/2023 10:15 AM   Period: 01/01/2023 to 01/31/2023          Page: 1\n"
    "\n"
    "Fund #  Description                                  Amount\n"
    "\n"
    "101     General Fund                               1,234.56\n"
    "102     Building Fund                                500.00\n"
    "        Sub-total                                  1,734.56\n"
    "201     Missions                                     -50.00\f\n"
    "                      First Baptist Church\n"
    "                    Fund Balance Report\n"
    "01/02/2023 10:15 AM   Period: 01/01/2023 to 01/31/2023          Page: 2\n"
    "Fund # Description Amount\n"
    "301     Youth Ministry                            12,345.67\n"
    "        Total                                     14,030.23\x1a\n"
)

V7_REPORT = (
    "                   Fund Summary Report\n"
    "\n"
    "               Period: 01/01/2023 to 01/31/2023\n"
    "Printed: 01/02/2023                                 Page: 1\n"
    "\n"
    "Fund   Description                                  Amount\n"
    "101    General Fund                                  10.00\n"
    "\n"
    "\f                   Fund Summary Report\n"
    "               Period: 01/01/2023 to 01/31/2023\n"
    "Printed: 01/02/2023                                 Page: 2\n"
    "FUND # DESCRIPTION AMOUNT\n"
    "102    Memorial Fund                                 20.00\n"
)


@pytest.fixture
def v9_report() -> str:
    return V9_REPORT


@pytest.fixture
def v7_report() -> str:
    return V7_REPORT
