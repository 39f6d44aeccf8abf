"""Sample tabular sources: departments of people and book collections.

Both collections implement TabularSource and DescribedSource directly.
Nothing is built at import time; use sample_department() and
sample_book_collection() to get populated instances.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .protocol import check_column, check_row


@dataclass(frozen=True)
class Person:
    """An employee record."""

    name: str
    age: int
    years_of_experience: int


@dataclass
class Department:
    """A named department of people, one row per person."""

    LABELS = ("Employee Name", "Age", "Years of Experience")

    name: str
    people: list[Person] = field(default_factory=list)

    @property
    def description(self) -> str:
        return f"Department ({self.name})"

    def add(self, person: Person) -> None:
        self.people.append(person)

    @property
    def row_count(self) -> int:
        return len(self.people)

    @property
    def column_count(self) -> int:
        return len(self.LABELS)

    def label(self, column: int) -> str:
        check_column(column, self.column_count)
        return self.LABELS[column]

    def cell(self, row: int, column: int) -> str:
        check_row(row, self.row_count)
        check_column(column, self.column_count)
        person = self.people[row]
        values = (person.name, str(person.age), str(person.years_of_experience))
        return values[column]


@dataclass(frozen=True)
class Book:
    """A book with its average review score."""

    title: str
    authors: str
    average_review: float


@dataclass
class BookCollection:
    """A named collection of books, one row per book."""

    LABELS = ("Book Title", "Authors", "Review Avg.")

    name: str
    books: list[Book] = field(default_factory=list)

    @property
    def description(self) -> str:
        return f"Collection {self.name}"

    def add(self, book: Book) -> None:
        self.books.append(book)

    @property
    def row_count(self) -> int:
        return len(self.books)

    @property
    def column_count(self) -> int:
        return len(self.LABELS)

    def label(self, column: int) -> str:
        check_column(column, self.column_count)
        return self.LABELS[column]

    def cell(self, row: int, column: int) -> str:
        check_row(row, self.row_count)
        check_column(column, self.column_count)
        book = self.books[row]
        values = (book.title, book.authors, str(book.average_review))
        return values[column]


def sample_department() -> Department:
    """Build the Engineering department sample."""
    department = Department(name="Engineering")
    department.add(Person(name="Eva", age=3000, years_of_experience=6))
    department.add(Person(name="Saleh", age=40, years_of_experience=18))
    department.add(Person(name="Amit", age=50000, years_of_experience=20))
    department.add(Person(name="Edwin", age=29, years_of_experience=3))
    return department


def sample_book_collection() -> BookCollection:
    """Build the My Favorites book collection sample."""
    favorites = BookCollection(name="My Favorites")
    favorites.add(Book(title="Project Hail Mary", authors="Andy Weir", average_review=5.0))
    favorites.add(
        Book(title="So Good They Can't Ignore You", authors="Cal Newport", average_review=5.0)
    )
    favorites.add(
        Book(title="Mistborn: The Final Empire", authors="Brandon Sanderson", average_review=5.0)
    )
    return favorites
