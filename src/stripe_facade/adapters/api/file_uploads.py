"""Endpoint: file uploads (served from the uploads host)."""

from __future__ import annotations

from pathlib import Path
from typing import IO

from stripe_facade.adapters.api.base import Api, Parameters


class FileUploads(Api):
    def base_url(self) -> str:
        return self._config.uploads_base

    def create(self, file: str | Path | IO[bytes], purpose: str):
        """Upload a file (`dispute_evidence` or `identity_document`).

        `file` is a path or an open binary file object.
        """

        if isinstance(file, (str, Path)):
            path = Path(file)
            with path.open("rb") as handle:
                return self._post("files", {"purpose": purpose}, files={"file": (path.name, handle)})
        name = Path(getattr(file, "name", "upload")).name
        return self._post("files", {"purpose": purpose}, files={"file": (name, file)})

    def find(self, file_id: str):
        return self._get(self._path("files", file_id))

    def all(self, parameters: Parameters = None):
        return self._list("files", parameters)
