"""
Node sinks.

Persists built trees as a flat JSON list of node records.
"""
import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import List, Sequence, Union

from core.constants import HIERARCHY_LEVELS
from core.models import Node

logger = logging.getLogger(__name__)


class JsonNodeSink:
    """Writes nodes to a JSON file in creation order."""

    def __init__(
        self,
        path: Union[str, Path],
        levels: Sequence[str] = HIERARCHY_LEVELS,
        indent: int = 2
    ):
        self.path = Path(path)
        self.levels = tuple(levels)
        self.indent = indent

    def to_records(self, nodes: Sequence[Node]) -> List[dict]:
        """Convert nodes to persisted records."""
        return [node.to_dict(self.levels) for node in nodes]

    def _file_mode(self) -> int:
        """Mode for the written file: the existing file's, else 0666 minus umask."""
        if self.path.exists():
            return stat.S_IMODE(self.path.stat().st_mode)
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask

    def write(self, nodes: Sequence[Node]) -> Path:
        """
        Write nodes to the destination file.

        The content goes to a temporary file next to the destination first,
        so a failed write leaves any existing file untouched.

        Returns:
            Path written
        """
        records = self.to_records(nodes)
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix='.tmp', dir=str(directory)
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(records, f, ensure_ascii=False, indent=self.indent, allow_nan=False)
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        logger.info(f"Wrote {len(records)} nodes to {self.path}")
        return self.path
