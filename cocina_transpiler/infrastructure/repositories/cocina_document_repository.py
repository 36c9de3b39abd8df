import json
from pathlib import Path

from ..io.exceptions import (
    CocinaFileNotFoundError,
    CocinaFileParseError,
    CocinaFileShapeError,
)


class CocinaDocumentRepository:
    pass

    def read_document(self, path: str | Path) -> dict[str, object]:
        file_path = Path(path)
        if not file_path.exists():
            raise CocinaFileNotFoundError(f"File not found: {file_path}")
        if not file_path.is_file():
            raise CocinaFileNotFoundError(f"Not a file: {file_path}")
        try:
            with file_path.open(encoding="utf-8") as handle:
                data = json.load(handle)
        except json.JSONDecodeError as e:
            raise CocinaFileParseError(f"Failed to parse JSON file {file_path}: {e}") from e
        except UnicodeDecodeError as e:
            raise CocinaFileParseError(f"File {file_path} is not UTF-8 encoded: {e}") from e
        if not isinstance(data, dict):
            raise CocinaFileShapeError(
                f"Expected a JSON object in {file_path}, found {type(data).__name__}"
            )
        return data
