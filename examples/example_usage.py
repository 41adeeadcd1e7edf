"""Ví dụ: dùng service layer (không qua Flask).

Ghi nhận một ngày đi muộn có lý do, duyệt lý do theo giờ rồi xem bảng lương tháng.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.attendance_payroll.attendance_payroll.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    record = container.attendance_service.record_attendance(
        "emp-001",
        date(2026, 10, 5),
        status="present",
        check_in="09:40",
        check_out="18:00",
        excuse_text="Kẹt xe",
    )
    print(record.deduction_type.value, record.deduction_amount, record.daily_net)

    record = container.excuse_service.adjudicate_excuse(record.record_id, "accepted", resolution="hourly")
    print(record.deduction_type.value, record.deduction_amount, record.daily_net)

    print(container.payroll_summary_service.get_monthly_summary("emp-001", "2026-10").to_dict())


if __name__ == "__main__":
    main()
