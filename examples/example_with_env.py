"""Example: Using environment variables for a persistent registry."""

import os

from dotenv import load_dotenv

from course_registry import RegistryClient

# Load environment variables from .env file
load_dotenv()

# Get data directory from environment
DATA_DIR = os.getenv("REGISTRY_DATA_DIR")

if not DATA_DIR:
    print("Error: REGISTRY_DATA_DIR environment variable must be set")
    print("\nCreate a .env file with:")
    print("REGISTRY_DATA_DIR=./data")
    exit(1)

with RegistryClient() as registry:
    print("=== Using Environment Variables ===\n")
    print(f"Data directory: {registry.data_dir}\n")

    lecturers = registry.lecturers.get_all()
    print(f"1. Found {len(lecturers)} stored lecturers")
    for lecturer in registry.lecturers.sorted_by_name(page=1, page_size=10):
        print(f"  - {lecturer.name} <{lecturer.email}> ({lecturer.department})")

    if not lecturers:
        lecturer = registry.lecturers.create(
            {"name": "Ada Lovelace", "email": "ada@x.edu", "hireDate": "2020-05-01", "department": "CS"}
        )
        print(f"  Added {lecturer.name}; run again to see it loaded from disk")

    units = registry.course_units.get_all()
    print(f"\n2. Found {len(units)} stored course units")

    print("\n=== Done ===")
