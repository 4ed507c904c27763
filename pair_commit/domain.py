"""
Core domain models for pair-commit.

An Author is a single collaborator; an AuthorCollection is the ordered
list of every known author. Neither touches the filesystem, so they can
be exercised without any persistence in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Collection, Dict, Iterable, Iterator, List, Tuple


@dataclass
class Author:
    """
    One collaborator that can be credited on a commit.

    No validation is performed on name or email; an empty string is a
    valid, if useless, value for either.
    """

    name: str
    email: str
    active: bool = False

    @classmethod
    def with_active_state(cls, name: str, email: str, active: bool) -> "Author":
        return cls(name=name, email=email, active=active)

    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def is_active(self) -> bool:
        return self.active

    def coauthor_line(self) -> str:
        """
        Return the Git commit trailer crediting this author.
        """

        return f"Co-authored-by: {self.name} <{self.email}>"

    def display_form(self) -> str:
        return f"{self.name} <{self.email}>"

    def to_dict(self) -> Dict[str, Any]:
        # Key order is part of the data file format.
        return {"name": self.name, "email": self.email, "active": self.active}

    def __str__(self) -> str:
        return self.display_form()


@dataclass
class AuthorCollection:
    """
    Ordered list of authors.

    Positions in the list are the only identity an author has: they are
    what the configure workflow asks the user to pick from. The list
    only ever grows by appending, so existing positions never move.
    """

    _authors: List[Author] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "AuthorCollection":
        return cls()

    @classmethod
    def from_records(cls, records: Iterable[Author]) -> "AuthorCollection":
        return cls(list(records))

    @property
    def authors(self) -> Tuple[Author, ...]:
        return tuple(self._authors)

    def __len__(self) -> int:
        return len(self._authors)

    def __iter__(self) -> Iterator[Author]:
        return iter(self._authors)

    def __getitem__(self, index: int) -> Author:
        return self._authors[index]

    def add_author(self, author: Author) -> None:
        self._authors.append(author)

    def active_authors(self) -> List[Author]:
        return [author for author in self._authors if author.is_active()]

    def set_active_by_indexes(self, indexes: Collection[int]) -> None:
        """
        Make exactly the authors at the given positions active.

        Every author whose position is not listed is deactivated, even
        if it was active before. Positions outside the collection never
        match anything and are ignored.
        """

        wanted = set(indexes)
        for index, author in enumerate(self._authors):
            if index in wanted:
                author.activate()
            else:
                author.deactivate()

    def join_active_coauthor_lines(self) -> str:
        return "\n".join(author.coauthor_line() for author in self.active_authors())

    def list_with_indexes(self) -> str:
        """
        Render every author tagged with its position, for the configure
        prompt.
        """

        blocks = [
            f"- index: {index}\n"
            f"  name: {author.name}\n"
            f"  email: {author.email}\n"
            f"  active: {'true' if author.active else 'false'}"
            for index, author in enumerate(self._authors)
        ]
        return "\n---\n".join(blocks)

    def to_records(self) -> List[Dict[str, Any]]:
        return [author.to_dict() for author in self._authors]
