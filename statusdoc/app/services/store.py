"""
In-memory application store.

A read-only store used by the HTTP service and the test-suite. The
store may be seeded from a JSON array of application records, which
is validated with the same pydantic schemas the engine consumes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional
from uuid import UUID

from pydantic import TypeAdapter

from statusdoc.app.exceptions import DuplicateApplicationError
from statusdoc.app.schemas.application import Application


_APPLICATION_LIST = TypeAdapter(List[Application])


class InMemoryApplicationStore:
    def __init__(self, applications: Iterable[Application] = ()) -> None:
        self._applications: List[Application] = list(applications)

    @classmethod
    def from_json_file(cls, path: Path) -> "InMemoryApplicationStore":
        """
        Load applications from a JSON array.

        Raises pydantic ``ValidationError`` if any record is malformed.
        """
        raw = Path(path).read_bytes()
        return cls(_APPLICATION_LIST.validate_json(raw))

    def find_application(self, application_id: UUID) -> Optional[Application]:
        matches = [
            application
            for application in self._applications
            if application.id == application_id
        ]

        if len(matches) > 1:
            raise DuplicateApplicationError(
                f"{len(matches)} applications share id '{application_id}'."
            )

        return matches[0] if matches else None

    def __len__(self) -> int:
        return len(self._applications)
