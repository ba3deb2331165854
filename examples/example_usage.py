"""Example: use the data manager and services directly (no Flask).

Controllers are a thin layer; the behaviour lives in the data manager and services.
"""

from src.classroom_admin.classroom_admin.container import build_container


def main():
    container = build_container(load_sample=True)
    manager = container.manager
    manager.subscribe(lambda event: print("changed:", event.kind.value, event.record_id))

    company_law = manager.classes[0]
    svc = container.attendance_service
    sheet = svc.start_session(company_law.class_id)
    svc.toggle(sheet, svc.roster_ids(sheet)[0])
    svc.save(sheet)

    print(container.dashboard_service.get_dashboard_ui())
    print(svc.get_sheet_ui(sheet))


if __name__ == "__main__":
    main()
