# -*- coding: utf-8 -*-
"""
Photo attachment held in memory until the enrollment is submitted.
"""

import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Union

# One photo per person of the enrollment
PHOTO_ROLES = ("eleve", "pere", "mere", "tuteur")


@dataclass(frozen=True)
class PhotoAttachment:
    """In-memory binary handle for one person's photo."""

    role: str
    file_name: str
    content: bytes
    mime_type: str = "application/octet-stream"

    def __post_init__(self):
        if self.role not in PHOTO_ROLES:
            raise ValueError(f"Unknown photo role: {self.role}")

    @property
    def part_name(self) -> str:
        """Multipart field name expected by the backend."""
        return f"photo_{self.role}"

    def as_file_tuple(self):
        """Tuple accepted by ``requests`` for a file part."""
        return (self.file_name, self.content, self.mime_type)

    @classmethod
    def from_path(cls, role: str, path: Union[str, Path]) -> "PhotoAttachment":
        path = Path(path)
        mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        return cls(role=role, file_name=path.name, content=path.read_bytes(), mime_type=mime_type)
