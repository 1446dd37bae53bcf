"""A small in-memory student database with an interactive menu."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass

MAX_STUDENTS = 100
MAX_NAME_LENGTH = 50


def _clip_name(name: str) -> str:
    """Keep a name within the stored length, minus room for a terminator."""
    return name.split("\n", 1)[0][: MAX_NAME_LENGTH - 1]


@dataclass(slots=True)
class Student:
    """One student record."""

    id: int
    name: str
    gpa: float

    def __post_init__(self) -> None:
        self.name = _clip_name(self.name)


class DatabaseFull(Exception):
    """Raised when the database already holds the maximum number of students."""


class DuplicateStudent(Exception):
    """Raised when adding a student whose ID is already present."""


class StudentDatabase:
    """Student records, newest first until sorted."""

    def __init__(self, capacity: int = MAX_STUDENTS) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._students: list[Student] = []

    def is_full(self) -> bool:
        return len(self._students) >= self.capacity

    def add(self, student: Student) -> None:
        """Put ``student`` at the front of the database."""
        if self.is_full():
            raise DatabaseFull("Database is full! Cannot add more students.")
        if self.find(student.id) is not None:
            raise DuplicateStudent(
                f"Student with ID {student.id} already exists! "
                "Please use a unique ID."
            )
        self._students.insert(0, student)

    def delete(self, student_id: int) -> Student:
        """Remove and return the student with ``student_id``."""
        for index, student in enumerate(self._students):
            if student.id == student_id:
                return self._students.pop(index)
        raise KeyError(student_id)

    def find(self, student_id: int) -> Student | None:
        """Return the student with ``student_id``, or None."""
        return next((s for s in self._students if s.id == student_id), None)

    def update(self, student_id: int, name: str, gpa: float) -> Student:
        """Replace the name and GPA of the student with ``student_id``."""
        student = self.find(student_id)
        if student is None:
            raise KeyError(student_id)
        student.name = _clip_name(name)
        student.gpa = gpa
        return student

    def sort_by_id(self) -> None:
        self._students.sort(key=lambda s: s.id)

    def sort_by_name(self) -> None:
        self._students.sort(key=lambda s: s.name.encode("utf-8"))

    def sort_by_gpa(self) -> None:
        """Sort by GPA, highest first; equal GPAs keep their order."""
        self._students.sort(key=lambda s: s.gpa, reverse=True)

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)


def _ask_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _ask_float(prompt: str) -> float | None:
    try:
        return float(input(prompt).strip())
    except ValueError:
        return None


def _show(student: Student) -> None:
    print(f"ID: {student.id}")
    print(f"Name: {student.name}")
    print(f"GPA: {student.gpa:.2f}")


def _add(db: StudentDatabase) -> None:
    if db.is_full():
        print("\nDatabase is full! Cannot add more students.")
        return
    print("\nEnter student details:")
    student_id = _ask_int("ID: ")
    if student_id is None:
        print("\nInvalid ID!")
        return
    if db.find(student_id) is not None:
        print(
            f"\nStudent with ID {student_id} already exists! Please use a unique ID."
        )
        return
    name = input("Name: ")
    gpa = _ask_float("GPA: ")
    if gpa is None:
        print("\nInvalid GPA!")
        return
    db.add(Student(student_id, name, gpa))
    print("\nStudent added successfully!")


def _with_id(db: StudentDatabase, action: str) -> int | None:
    if not db:
        print(f"\nDatabase is empty! No students to {action}.")
        return None
    student_id = _ask_int(f"\nEnter student ID to {action}: ")
    if student_id is None:
        print("\nInvalid ID!")
    return student_id


def _sort(db: StudentDatabase) -> None:
    print("\n=== SORT MENU ===")
    print("1. Sort by ID")
    print("2. Sort by Name")
    print("3. Sort by GPA (descending)")
    choice = _ask_int("Enter your choice (1-3): ")
    sorters = {
        1: (db.sort_by_id, "ID"),
        2: (db.sort_by_name, "name"),
        3: (db.sort_by_gpa, "GPA (descending)"),
    }
    if choice not in sorters:
        print("\nInvalid choice! Please try again.")
        return
    if len(db) < 2:
        print("\nDatabase has 0 or 1 student, no need to sort.")
        return
    sorter, label = sorters[choice]
    sorter()
    print(f"\nStudents sorted by {label} successfully!")


def main(argv: list[str] | None = None) -> int:
    """Run the student database menu on standard input and output."""
    db = StudentDatabase()
    try:
        while True:
            print("\n=== STUDENT DATABASE MANAGEMENT SYSTEM ===")
            print("1. Add a student")
            print("2. Delete a student")
            print("3. Search for a student")
            print("4. Update student information")
            print("5. Sort students")
            print("6. Display all students")
            print("7. Exit")
            choice = _ask_int("Enter your choice (1-7): ")
            if choice == 1:
                _add(db)
            elif choice == 2:
                student_id = _with_id(db, "delete")
                if student_id is None:
                    continue
                try:
                    db.delete(student_id)
                except KeyError:
                    print(f"\nStudent with ID {student_id} not found!")
                else:
                    print(f"\nStudent with ID {student_id} deleted successfully!")
            elif choice == 3:
                student_id = _with_id(db, "search")
                if student_id is None:
                    continue
                student = db.find(student_id)
                if student is None:
                    print(f"\nStudent with ID {student_id} not found!")
                else:
                    print("\nStudent found:")
                    _show(student)
            elif choice == 4:
                student_id = _with_id(db, "update")
                if student_id is None:
                    continue
                student = db.find(student_id)
                if student is None:
                    print(f"\nStudent with ID {student_id} not found!")
                    continue
                print("\nCurrent student details:")
                _show(student)
                print("\nEnter new details:")
                name = input("Name: ")
                gpa = _ask_float("GPA: ")
                if gpa is None:
                    print("\nInvalid GPA!")
                    continue
                db.update(student_id, name, gpa)
                print("\nStudent information updated successfully!")
            elif choice == 5:
                _sort(db)
            elif choice == 6:
                if not db:
                    print("\nDatabase is empty! No students to display.")
                    continue
                print("\n=== STUDENT DATABASE ===")
                print(f"Total students: {len(db)}\n")
                for number, student in enumerate(db, start=1):
                    print(f"Student {number}:")
                    _show(student)
                    print("------------------------")
            elif choice == 7:
                print("\nExiting program. Goodbye!")
                return 0
            else:
                print("\nInvalid choice! Please try again.")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())