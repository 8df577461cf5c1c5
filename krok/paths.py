"""Stable numeric identifiers for resource files and the index header that lists them."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, Sequence, Union

RESC_EXTENSION = ".resc"

_INDEX_HEADER = (
    "////////////////////////////////////////////////////////////////////\n"
    "//    Index of all resources and their unique identifiers        //\n"
    "////////////////////////////////////////////////////////////////////\n"
    "\n"
    "//Only the integer matters; the comment is the last known path of the file\n"
    "\n"
)

_UINT = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


def _parse_uint(text: str) -> int:
    """Parse a leading unsigned integer, detecting hex (0x) and octal (0) prefixes."""
    match = _UINT.match(text)
    if match is None:
        raise ValueError(f"No unsigned integer in {text!r}")
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits, 16)
    elif len(digits) > 1 and digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    if sign == "-":
        value = -value
    return value % (1 << 32)


def to_const_name(file_name: str) -> str:
    """Turn a file name into the constant name used in the resource index."""
    chars = []
    for char in file_name:
        code = ord(char)
        if 96 < code < 122:
            chars.append(chr(code - 32))
        elif 31 < code < 47:
            chars.append("_")
        else:
            chars.append(char)
    return "RS__" + "".join(chars)


def find_lowest_untaken(taken_sorted: Sequence[int], candidate: int = 0) -> int:
    """Return the lowest identifier from ``candidate`` upward not in ``taken_sorted``."""
    if len(taken_sorted) <= candidate:
        return candidate
    for taken in taken_sorted:
        if candidate == taken:
            candidate += 1
    return candidate


def shader_key(vertex_path: str, fragment_path: str) -> str:
    """Join a vertex and fragment shader path into one cache key."""
    return f"{vertex_path}\t{fragment_path}"


def split_shader_key(key: str) -> tuple[str, str]:
    """Split a key made by ``shader_key`` back into its two paths."""
    parts = key.split("\t")
    return parts[0], parts[1] if len(parts) > 1 else ""


class PathManager:
    """Gives every file under a resource folder a unique id kept in a sidecar ``.resc`` file."""

    def __init__(
        self,
        root: Union[str, Path] = "Assets",
        index_name: str = "fileIndex.hpp",
    ) -> None:
        self.root = Path(root)
        self.index_name = index_name
        self._paths: dict[int, str] = {}

    @property
    def index_path(self) -> Path:
        return self.root / self.index_name

    def file_path(self, unique_id: int) -> str:
        """Return the path mapped to ``unique_id``, or an empty string if none is."""
        return self._paths.get(unique_id, "")

    def reset_paths(self) -> None:
        """Empty the index and delete every ``.resc`` file under the root."""
        self.index_path.write_text("")
        for path in self._files():
            if path.suffix == RESC_EXTENSION:
                path.unlink()

    def map_paths(self) -> None:
        """Assign ids to new files, load ids of known ones and rewrite the index."""
        old_constants = self._read_index()
        taken = sorted(old_constants)
        lowest = find_lowest_untaken(taken)
        new_constants: dict[int, str] = {}

        for path in self._files():
            if path.name == self.index_name or path.suffix == RESC_EXTENSION:
                continue

            resc_path = path.parent / (path.name + RESC_EXTENSION)
            if resc_path.is_file():
                unique_id, const_name = self._read_resc(resc_path)
                self._paths[unique_id] = str(path)
                new_constants[unique_id] = old_constants.get(
                    unique_id, f"#define {const_name}"
                )
                continue

            try:
                handle = resc_path.open("w")
            except OSError:
                continue

            with handle:
                unique_id = lowest
                taken.append(unique_id)
                lowest = find_lowest_untaken(taken, lowest + 1)
                const_name = to_const_name(path.name)
                handle.write(f"{unique_id}\n{const_name}\n")

            self._paths[unique_id] = str(path)
            new_constants[unique_id] = f"#define {const_name}"

        with self.index_path.open("w") as index:
            index.write(_INDEX_HEADER)
            for unique_id, name in sorted(new_constants.items()):
                index.write(f"{name}\t{unique_id}\t\t //{self._paths.get(unique_id, '')}\n")

    def _files(self) -> Iterator[Path]:
        if not self.root.is_dir():
            raise FileNotFoundError(f"Resource folder {self.root} does not exist")
        return iter(sorted(path for path in self.root.rglob("*") if path.is_file()))

    def _read_index(self) -> dict[int, str]:
        if not self.index_path.is_file():
            return {}
        constants: dict[int, str] = {}
        for line in self.index_path.read_text().splitlines():
            fields = line.split("\t")
            unique_id = fields[1] if len(fields) > 1 else ""
            if not unique_id:
                continue
            constants[_parse_uint(unique_id)] = fields[0]
        return constants

    @staticmethod
    def _read_resc(path: Path) -> tuple[int, str]:
        lines = path.read_text().splitlines()
        unique_id = _parse_uint(lines[0] if lines else "")
        return unique_id, lines[1] if len(lines) > 1 else ""