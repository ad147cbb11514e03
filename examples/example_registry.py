"""Example: Managing lecturers and course units in memory."""

from course_registry import LecturerUpdate, NotFoundError, RegistryClient

with RegistryClient() as registry:
    print("=== Course Registry Example ===\n")

    # Add lecturers
    print("1. Adding lecturers...")
    ada = registry.lecturers.create(
        {"name": "Ada Lovelace", "email": "ada@x.edu", "hireDate": "2020-05-01", "department": "CS"}
    )
    grace = registry.lecturers.create(
        {"name": "Grace Hopper", "email": "grace@x.edu", "hireDate": "2018-09-01", "department": "CS"}
    )
    print(f"Created {ada.name} ({ada.id}) and {grace.name} ({grace.id})")

    # Add course units referencing the lecturers
    print("\n2. Adding course units...")
    for name, lecturer, semester in [
        ("Compilers", grace, "Fall"),
        ("Analytical Engines", ada, "Spring"),
        ("Databases", grace, "Spring"),
    ]:
        unit = registry.course_units.create(
            {"name": name, "lecturerId": lecturer.id, "semester": semester, "year": 2024}
        )
        print(f"  - {unit.name} ({unit.semester} {unit.year})")

    # Queries
    print("\n3. Querying...")
    print(f"CS lecturers: {registry.lecturers.count_by_department('CS')}")
    print(f"Hired in 2020: {[l.name for l in registry.lecturers.by_hire_year(2020)]}")
    print(f"Taught by Grace: {[u.name for u in registry.course_units.by_lecturer(grace.id)]}")
    print(f"Spring 2024: {[u.name for u in registry.course_units.by_semester_and_year('Spring', 2024)]}")
    print(f"Sorted: {[u.name for u in registry.course_units.sorted_by_name()]}")

    # Updates
    print("\n4. Updating...")
    ada = registry.lecturers.update(ada.id, LecturerUpdate(department="Mathematics"))
    print(f"{ada.name} moved to {ada.department} (updatedAt={ada.updated_at})")

    # Delete
    print("\n5. Deleting...")
    registry.lecturers.delete(ada.id)
    try:
        registry.lecturers.get(ada.id)
    except NotFoundError as e:
        print(f"{e.kind.value}: {e.detail}")

    print("\n=== Done ===")
